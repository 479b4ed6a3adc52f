"""
Activity Extension Contract

Every app that publishes activities implements this protocol and registers an
instance with the ActivityManager. The manager asks each extension in turn;
an extension answers ``None`` when a request is not meant for it, which tells
the manager to ask the next one. Empty lists, sets and dicts are real answers.
"""

from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

from .models import ActivityRecord, Navigation, QueryFilter

# Delivery methods for notification settings
METHOD_STREAM = 'stream'
METHOD_MAIL = 'email'

# Parameter kinds understood by the renderer
PARAMETER_USERNAME = 'username'  # rendered with the user's avatar
PARAMETER_FILE = 'file'  # path stripped, full path in a tooltip


@runtime_checkable
class ActivityExtension(Protocol):
    """Protocol defining the interface for activity extensions"""

    def get_notification_types(self, language_code: Optional[str]) -> Optional[dict[str, str]]:
        """Notification types this extension adds, mapped to their display label"""
        ...

    def get_default_types(self, method: str) -> Optional[set[str]]:
        """Types enabled by default for the given delivery method"""
        ...

    def get_type_icon(self, type_: str) -> Optional[str]:
        """CSS class of the icon for a notification type"""
        ...

    def translate(
        self,
        app: str,
        text: str,
        params: Sequence[str],
        strip_path: bool,
        highlight_params: bool,
        language_code: Optional[str],
    ) -> Optional[str]:
        """Render the subject ``text`` of ``app`` in the requested language"""
        ...

    def get_special_parameter_list(self, app: str, text: str) -> Optional[list[str]]:
        """Parameter kinds by position, for parameters that need rich rendering"""
        ...

    def get_group_parameter(self, activity: ActivityRecord) -> Optional[int]:
        """Index of the parameter to group activities by"""
        ...

    def get_navigation(self, language_code: Optional[str] = None) -> Optional[Navigation]:
        """Additional navigation entries"""
        ...

    def is_filter_valid(self, filter_value: str) -> bool:
        """Whether ``filter_value`` (from ``?filter=...``) is a filter of this extension"""
        ...

    def filter_notification_types(self, types: Iterable[str], filter_: str) -> Optional[set[str]]:
        """Narrow ``types`` for the given filter"""
        ...

    def get_query_for_filter(self, filter_: str) -> Optional[QueryFilter]:
        """SQL condition and parameters implementing the given filter"""
        ...
