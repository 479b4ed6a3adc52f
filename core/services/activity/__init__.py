"""
Activity Extensions

Lets installed apps contribute activity types, translations, navigation
entries and filters to the shared activity stream.
"""

from .extension import (
    METHOD_MAIL,
    METHOD_STREAM,
    PARAMETER_FILE,
    PARAMETER_USERNAME,
    ActivityExtension,
)
from .l10n import L10N, L10NFactory
from .manager import ActivityManager, get_manager, register_extension
from .models import ActivityRecord, FilterDescriptor, Navigation, NavigationEntry, QueryFilter
from .routing import URLGenerator

__all__ = [
    'METHOD_MAIL',
    'METHOD_STREAM',
    'PARAMETER_FILE',
    'PARAMETER_USERNAME',
    'ActivityExtension',
    'ActivityManager',
    'ActivityRecord',
    'FilterDescriptor',
    'L10N',
    'L10NFactory',
    'Navigation',
    'NavigationEntry',
    'QueryFilter',
    'URLGenerator',
    'get_manager',
    'register_extension',
]
