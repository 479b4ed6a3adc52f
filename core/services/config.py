"""
Core configuration service for the groupware host.

Reads the activity stream settings from Django settings:

- ACTIVITY_ENABLED: switch the activity stream on or off
- ACTIVITY_EXTENSIONS: dotted paths of the extension classes to register
- ACTIVITY_LIST_ROUTE: URL name of the activity list view

All callers should go through these helpers instead of reading settings
directly so the defaults live in one place.
"""

import logging
from typing import Callable

from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import ServiceDisabled, ServiceNotConfigured

logger = logging.getLogger(__name__)


DEFAULT_ACTIVITY_LIST_ROUTE = 'activity-list'


def is_activity_enabled() -> bool:
    """
    Check if the activity stream is enabled.
    
    Returns:
        True unless ACTIVITY_ENABLED is set to a false value
    """
    return bool(getattr(settings, 'ACTIVITY_ENABLED', True))


def get_extension_paths() -> list[str]:
    """
    Get the configured extension paths.
    
    Returns:
        List of dotted paths, empty if none are configured
    """
    return list(getattr(settings, 'ACTIVITY_EXTENSIONS', []))


def get_activity_list_route() -> str:
    """Get the URL name of the activity list view."""
    return getattr(settings, 'ACTIVITY_LIST_ROUTE', DEFAULT_ACTIVITY_LIST_ROUTE)


def load_extension_factories() -> list[Callable]:
    """
    Import the configured activity extensions.
    
    Returns:
        The extension classes (or factory callables), in configured order
        
    Raises:
        ServiceNotConfigured: If a path cannot be imported or is not callable
        
    Example:
        >>> for factory in load_extension_factories():
        ...     manager.register(factory())
    """
    factories = []
    for path in get_extension_paths():
        try:
            factory = import_string(path)
        except ImportError as e:
            logger.error(f"Cannot import activity extension {path}: {e}")
            raise ServiceNotConfigured(f"Activity extension '{path}' cannot be imported") from e
        if not callable(factory):
            raise ServiceNotConfigured(f"Activity extension '{path}' is not callable")
        factories.append(factory)
    return factories


def require_activity_enabled() -> None:
    """
    Ensure the activity stream is enabled.
    
    Raises:
        ServiceDisabled: If ACTIVITY_ENABLED is false
    """
    if not is_activity_enabled():
        raise ServiceDisabled("Activity stream is disabled")
