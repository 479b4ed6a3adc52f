"""
Value types exchanged between the activity host and its extensions.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class ActivityRecord:
    """
    A single activity as handed to the extensions for rendering.
    
    Attributes:
        app: Identifier of the app that published the activity (e.g. 'dav')
        subject: Subject key naming the translation template (e.g. 'calendar_add')
        params: Positional parameters; the first entry is always the actor
        language_code: Requested language, None for the active language
        type: Notification type the activity belongs to (e.g. 'calendar')
    """
    app: str
    subject: str
    params: tuple = ()
    language_code: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class NavigationEntry:
    """A link in the activity navigation sidebar."""
    id: str
    icon: str
    name: str
    url: str

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'icon': self.icon,
            'name': self.name,
            'url': self.url,
        }


@dataclass(frozen=True)
class Navigation:
    """
    Navigation entries contributed by an extension.
    
    Attributes:
        top: Entries shown above the app list
        apps: Entries shown in the per-app list
    """
    top: tuple[NavigationEntry, ...] = ()
    apps: tuple[NavigationEntry, ...] = ()

    def to_dict(self) -> dict:
        return {
            'top': [entry.to_dict() for entry in self.top],
            'apps': [entry.to_dict() for entry in self.apps],
        }


@dataclass(frozen=True)
class FilterDescriptor:
    """A filter key and the notification types it lets through."""
    key: str

    def apply(self, types: Iterable[str]) -> set[str]:
        """Intersect the given type identifiers with the type of this filter."""
        return {self.key} & set(types)


@dataclass(frozen=True)
class QueryFilter:
    """
    SQL condition contributed for a filter.
    
    Example:
        QueryFilter('`app` = %s and `subject` like %s', ('dav', 'calendar%'))
    """
    condition: str
    parameters: tuple = ()
