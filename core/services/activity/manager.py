"""
Activity Extension Manager

Central registry holding the activity extensions of all installed apps.
Requests are passed to each extension in registration order; the first
extension that answers with something other than None wins.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

from .extension import ActivityExtension
from .models import ActivityRecord, Navigation, QueryFilter

logger = logging.getLogger(__name__)


class ActivityManager:
    """
    Registry and dispatcher for activity extensions.

    Example:
        >>> manager = ActivityManager()
        >>> manager.register(CalendarActivity())
        >>> manager.translate('dav', 'calendar_add', ['alice', 'Work'], False, False, 'en')
        'alice created calendar Work'
    """

    def __init__(self):
        self._extensions: list[ActivityExtension] = []

    def register(self, extension: ActivityExtension) -> None:
        """
        Register an extension.

        Args:
            extension: Object implementing the ActivityExtension protocol

        Raises:
            ValueError: If the extension is already registered
        """
        if extension in self._extensions:
            raise ValueError(f"Activity extension {extension!r} is already registered")
        self._extensions.append(extension)
        logger.info(f"Activity extension registered: {extension.__class__.__name__}")

    def unregister(self, extension: ActivityExtension) -> None:
        """Remove a registered extension"""
        self._extensions.remove(extension)

    def clear(self) -> None:
        """Remove all registered extensions"""
        self._extensions.clear()

    def is_registered(self, extension_cls: type) -> bool:
        """Check if an extension of the given class is registered"""
        return any(isinstance(extension, extension_cls) for extension in self._extensions)

    def get_extensions(self) -> list[ActivityExtension]:
        """List all registered extensions in registration order"""
        return list(self._extensions)

    def _first(self, method: str, *args: Any) -> Any:
        """Ask each extension in turn, return the first non-None answer."""
        for extension in self._extensions:
            result = self._call(extension, method, *args)
            if result is not None:
                return result
        return None

    def _call(self, extension: ActivityExtension, method: str, *args: Any) -> Any:
        name = extension.__class__.__name__
        logger.debug(f"Calling {name}.{method}")
        try:
            return getattr(extension, method)(*args)
        except Exception as e:
            logger.error(f"Activity extension {name}.{method} failed: {e}")
            raise

    def get_notification_types(self, language_code: Optional[str]) -> dict[str, str]:
        """Merge the notification types of all extensions"""
        types: dict[str, str] = {}
        for extension in self._extensions:
            result = self._call(extension, 'get_notification_types', language_code)
            if result:
                types.update(result)
        return types

    def get_default_types(self, method: str) -> set[str]:
        """Union of the default types of all extensions for a delivery method"""
        types: set[str] = set()
        for extension in self._extensions:
            result = self._call(extension, 'get_default_types', method)
            if result:
                types.update(result)
        return types

    def get_type_icon(self, type_: str) -> Optional[str]:
        return self._first('get_type_icon', type_)

    def translate(
        self,
        app: str,
        text: str,
        params: Sequence[str],
        strip_path: bool,
        highlight_params: bool,
        language_code: Optional[str],
    ) -> Optional[str]:
        """
        Render an activity subject with the first extension that knows it.

        Returns:
            The rendered string, or None if no extension handles ``app``/``text``
        """
        return self._first(
            'translate', app, text, params, strip_path, highlight_params, language_code
        )

    def translate_record(
        self,
        record: ActivityRecord,
        strip_path: bool = False,
        highlight_params: bool = False,
    ) -> Optional[str]:
        """Render an ActivityRecord, see translate()"""
        return self.translate(
            record.app,
            record.subject,
            list(record.params),
            strip_path,
            highlight_params,
            record.language_code,
        )

    def get_special_parameter_list(self, app: str, text: str) -> Optional[list[str]]:
        return self._first('get_special_parameter_list', app, text)

    def get_group_parameter(self, activity: ActivityRecord) -> Optional[int]:
        return self._first('get_group_parameter', activity)

    def get_navigation(self, language_code: Optional[str] = None) -> Navigation:
        """Collect the navigation entries of all extensions"""
        top = []
        apps = []
        for extension in self._extensions:
            result = self._call(extension, 'get_navigation', language_code)
            if result is None:
                continue
            top.extend(result.top)
            apps.extend(result.apps)
        return Navigation(top=tuple(top), apps=tuple(apps))

    def is_filter_valid(self, filter_value: str) -> bool:
        """Check if any extension knows the filter"""
        return any(
            self._call(extension, 'is_filter_valid', filter_value)
            for extension in self._extensions
        )

    def filter_notification_types(self, types: Iterable[str], filter_: str) -> set[str]:
        """
        Narrow notification types for a filter.

        Returns:
            The answer of the first extension handling the filter, or the
            given types unchanged if none does
        """
        types = list(types)
        result = self._first('filter_notification_types', types, filter_)
        if result is None:
            return set(types)
        return result

    def get_query_for_filter(self, filter_: str) -> Optional[QueryFilter]:
        return self._first('get_query_for_filter', filter_)


# Global manager instance
_manager = ActivityManager()


def get_manager() -> ActivityManager:
    """Get the global activity manager"""
    return _manager


def register_extension(extension: ActivityExtension) -> None:
    """Register an extension with the global activity manager"""
    _manager.register(extension)


def load_configured_extensions(factories: Iterable[Callable[[], ActivityExtension]]) -> None:
    """
    Instantiate extension factories and register them with the global manager.

    Factories that are classes already registered are skipped, so loading
    the configuration twice registers each extension once.
    """
    for factory in factories:
        if isinstance(factory, type) and _manager.is_registered(factory):
            logger.debug(f"Activity extension already registered: {factory.__name__}")
            continue
        register_extension(factory())
