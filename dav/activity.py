"""
Calendar activities

Activity extension of the DAV app. Renders the calendar created/updated/deleted
activities and adds the "Calendar" filter to the activity stream.

Subjects:
    calendar_add, calendar_update, calendar_delete
        Someone else acted on a calendar shared with the recipient.
        Params: [actor, calendar name]
    calendar_add_self, calendar_update_self, calendar_delete_self
        The recipient acted on their own calendar. Same params, the actor
        is not rendered.
"""

import enum
import logging
from typing import Iterable, Optional, Sequence

from django.utils.translation import gettext_noop

from core.services import config
from core.services.activity import (
    METHOD_STREAM,
    PARAMETER_USERNAME,
    ActivityRecord,
    FilterDescriptor,
    L10N,
    L10NFactory,
    Navigation,
    NavigationEntry,
    QueryFilter,
    URLGenerator,
)

logger = logging.getLogger(__name__)

APP = 'dav'

# Filter with all calendar related activities
CALENDAR = 'calendar'

CALENDAR_ICON = 'icon-calendar-dark'

SUBJECT_ADD = 'calendar_add'
SUBJECT_UPDATE = 'calendar_update'
SUBJECT_DELETE = 'calendar_delete'

SELF_SUFFIX = '_self'


class CalendarAction(enum.Enum):
    """What happened to the calendar."""
    ADD = SUBJECT_ADD
    UPDATE = SUBJECT_UPDATE
    DELETE = SUBJECT_DELETE

    def subject(self, self_action: bool = False) -> str:
        """Subject key for this action, ``self_action`` when the actor owns the calendar"""
        return self.value + SELF_SUFFIX if self_action else self.value


# Message ids per subject key
SUBJECTS = {
    SUBJECT_ADD: gettext_noop('%(actor)s created calendar %(calendar)s'),
    SUBJECT_ADD + SELF_SUFFIX: gettext_noop('You created calendar %(calendar)s'),
    SUBJECT_DELETE: gettext_noop('%(actor)s deleted calendar %(calendar)s'),
    SUBJECT_DELETE + SELF_SUFFIX: gettext_noop('You deleted calendar %(calendar)s'),
    SUBJECT_UPDATE: gettext_noop('%(actor)s updated calendar %(calendar)s'),
    SUBJECT_UPDATE + SELF_SUFFIX: gettext_noop('You updated calendar %(calendar)s'),
}


def calendar_record(action: CalendarAction, actor: str, calendar_name: str, *,
                    self_action: bool = False,
                    language_code: Optional[str] = None) -> ActivityRecord:
    """Build the activity published when ``actor`` acts on a calendar"""
    return ActivityRecord(
        app=APP,
        subject=action.subject(self_action),
        params=(actor, calendar_name),
        language_code=language_code,
        type=CALENDAR,
    )


def subject_params(params: Sequence[str]) -> dict[str, str]:
    """
    Map positional activity params onto the placeholders of the messages.

    Missing params render as an empty string, extra params are ignored.
    """
    params = list(params or [])
    params += [''] * (2 - len(params))
    return {'actor': params[0], 'calendar': params[1]}


class CalendarActivity:
    """Activity extension for calendars"""

    def __init__(self, language_factory: Optional[L10NFactory] = None,
                 url_generator: Optional[URLGenerator] = None):
        self.language_factory = language_factory or L10NFactory()
        self.url_generator = url_generator or URLGenerator()

    def _get_l10n(self, language_code: Optional[str] = None) -> L10N:
        return self.language_factory.get(APP, language_code)

    def get_notification_types(self, language_code: Optional[str]) -> dict[str, str]:
        l10n = self._get_l10n(language_code)
        return {
            CALENDAR: l10n.t(gettext_noop('A calendar was modified')),
        }

    def get_default_types(self, method: str) -> set[str]:
        if method == METHOD_STREAM:
            return {CALENDAR}
        return set()

    def get_type_icon(self, type_: str) -> Optional[str]:
        if type_ == CALENDAR:
            return CALENDAR_ICON
        return None

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
        Render a calendar activity subject.

        ``strip_path`` and ``highlight_params`` are left to the renderer.

        Returns:
            The rendered subject, or None for other apps and unknown subjects
        """
        if app != APP:
            return None

        message = SUBJECTS.get(text)
        if message is None:
            logger.debug(f"Unknown calendar subject: {text}")
            return None

        return self._get_l10n(language_code).t(message, subject_params(params))

    def get_special_parameter_list(self, app: str, text: str) -> Optional[list[str]]:
        """The actor of activities by other users is rendered with their avatar."""
        if app == APP and text in (SUBJECT_ADD, SUBJECT_DELETE, SUBJECT_UPDATE):
            return [PARAMETER_USERNAME]
        return None

    def get_group_parameter(self, activity: ActivityRecord) -> Optional[int]:
        return None

    def get_navigation(self, language_code: Optional[str] = None) -> Navigation:
        l10n = self._get_l10n(language_code)
        entry = NavigationEntry(
            id=CALENDAR,
            icon=CALENDAR_ICON,
            name=l10n.t(gettext_noop('Calendar')),
            url=self.url_generator.link_to_route(
                config.get_activity_list_route(), {'filter': CALENDAR}
            ),
        )
        return Navigation(top=(), apps=(entry,))

    def is_filter_valid(self, filter_value: str) -> bool:
        return filter_value == CALENDAR

    def filter_notification_types(self, types: Iterable[str], filter_: str) -> Optional[set[str]]:
        if filter_ == CALENDAR:
            return FilterDescriptor(CALENDAR).apply(types)
        return None

    def get_query_for_filter(self, filter_: str) -> Optional[QueryFilter]:
        return None
