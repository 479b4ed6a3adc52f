import logging

from django.http import JsonResponse
from django.utils import translation
from django.views.decorators.http import require_GET

from core.services import config
from core.services.activity import get_manager
from core.services.exceptions import ServiceDisabled

logger = logging.getLogger(__name__)

# Filter value that shows every activity type
FILTER_ALL = 'all'


@require_GET
def activity_list(request):
    """
    Activity stream metadata for the requested filter.
    
    Returns the navigation entries of all extensions and the notification
    types visible under ``?filter=...`` in the request language.
    """
    try:
        config.require_activity_enabled()
    except ServiceDisabled as e:
        return JsonResponse({'success': False, 'error': str(e)}, status=503)
    
    manager = get_manager()
    filter_type = request.GET.get('filter', FILTER_ALL) or FILTER_ALL
    
    if filter_type != FILTER_ALL and not manager.is_filter_valid(filter_type):
        logger.warning(f"Invalid activity filter requested: {filter_type}")
        return JsonResponse(
            {'success': False, 'error': f"Unknown filter '{filter_type}'"},
            status=400,
        )
    
    language_code = translation.get_language()
    types = manager.get_notification_types(language_code)
    if filter_type != FILTER_ALL:
        visible = manager.filter_notification_types(types.keys(), filter_type)
        types = {key: label for key, label in types.items() if key in visible}
    
    return JsonResponse({
        'success': True,
        'filter': filter_type,
        'navigation': manager.get_navigation(language_code).to_dict(),
        'types': types,
    })
