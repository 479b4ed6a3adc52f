"""
Tests for the activity extension manager and its collaborators
"""

from unittest.mock import Mock

from django.apps import apps
from django.test import TestCase
from django.urls import NoReverseMatch

from core.services.activity import (
    METHOD_MAIL,
    METHOD_STREAM,
    PARAMETER_FILE,
    PARAMETER_USERNAME,
    ActivityManager,
    ActivityRecord,
    FilterDescriptor,
    L10NFactory,
    Navigation,
    NavigationEntry,
    QueryFilter,
    URLGenerator,
    get_manager,
)
from dav.activity import CalendarActivity


class FilesActivity:
    """Minimal extension used to test dispatch across several extensions."""

    def get_notification_types(self, language_code):
        return {'file_changed': 'A file was changed'}

    def get_default_types(self, method):
        return {'file_changed'} if method == METHOD_MAIL else set()

    def get_type_icon(self, type_):
        return 'icon-files' if type_ == 'file_changed' else None

    def translate(self, app, text, params, strip_path, highlight_params, language_code):
        if app != 'files':
            return None
        return f"{params[0]} changed {params[1]}"

    def get_special_parameter_list(self, app, text):
        if app == 'files':
            return [PARAMETER_USERNAME, PARAMETER_FILE]
        return None

    def get_group_parameter(self, activity):
        return 1 if activity.app == 'files' else None

    def get_navigation(self, language_code=None):
        return Navigation(
            top=(NavigationEntry('files', 'icon-files', 'Files', '/activity/?filter=files'),),
            apps=(),
        )

    def is_filter_valid(self, filter_value):
        return filter_value == 'files'

    def filter_notification_types(self, types, filter_):
        if filter_ == 'files':
            return FilterDescriptor('file_changed').apply(types)
        return None

    def get_query_for_filter(self, filter_):
        if filter_ == 'files':
            return QueryFilter('`app` = %s', ('files',))
        return None


class SilentActivity:
    """Extension that handles nothing."""

    def get_notification_types(self, language_code):
        return None

    def get_default_types(self, method):
        return None

    def get_type_icon(self, type_):
        return None

    def translate(self, app, text, params, strip_path, highlight_params, language_code):
        return None

    def get_special_parameter_list(self, app, text):
        return None

    def get_group_parameter(self, activity):
        return None

    def get_navigation(self, language_code=None):
        return None

    def is_filter_valid(self, filter_value):
        return False

    def filter_notification_types(self, types, filter_):
        return None

    def get_query_for_filter(self, filter_):
        return None


class ActivityManagerRegistryTestCase(TestCase):
    """Test registering extensions."""

    def setUp(self):
        self.manager = ActivityManager()

    def test_register(self):
        extension = FilesActivity()
        self.manager.register(extension)
        self.assertEqual(self.manager.get_extensions(), [extension])

    def test_register_twice_raises(self):
        extension = FilesActivity()
        self.manager.register(extension)
        with self.assertRaises(ValueError):
            self.manager.register(extension)

    def test_unregister_and_clear(self):
        files = FilesActivity()
        silent = SilentActivity()
        self.manager.register(files)
        self.manager.register(silent)

        self.manager.unregister(files)
        self.assertEqual(self.manager.get_extensions(), [silent])

        self.manager.clear()
        self.assertEqual(self.manager.get_extensions(), [])

    def test_global_manager_has_configured_extensions(self):
        """Test that the app registry loaded the extensions from settings."""
        names = [e.__class__.__name__ for e in get_manager().get_extensions()]
        self.assertIn('CalendarActivity', names)

    def test_is_registered(self):
        self.manager.register(FilesActivity())
        self.assertTrue(self.manager.is_registered(FilesActivity))
        self.assertFalse(self.manager.is_registered(SilentActivity))

    def test_ready_twice_registers_extensions_once(self):
        """Test that loading the configuration again does not duplicate extensions."""
        apps.get_app_config('core').ready()
        apps.get_app_config('core').ready()

        calendar_extensions = [
            e for e in get_manager().get_extensions() if isinstance(e, CalendarActivity)
        ]
        self.assertEqual(len(calendar_extensions), 1)


class ActivityManagerDispatchTestCase(TestCase):
    """Test how requests are passed to the extensions."""

    def setUp(self):
        self.manager = ActivityManager()
        self.manager.register(SilentActivity())
        self.manager.register(FilesActivity())

    def test_empty_manager(self):
        manager = ActivityManager()
        self.assertEqual(manager.get_notification_types('en'), {})
        self.assertEqual(manager.get_default_types('stream'), set())
        self.assertIsNone(manager.get_type_icon('file_changed'))
        self.assertIsNone(manager.translate('files', 'x', ['a', 'b'], False, False, 'en'))
        self.assertEqual(manager.get_navigation('en'), Navigation())
        self.assertFalse(manager.is_filter_valid('files'))

    def test_notification_types_are_merged(self):
        self.assertEqual(
            self.manager.get_notification_types('en'),
            {'file_changed': 'A file was changed'}
        )

    def test_default_types(self):
        self.assertEqual(self.manager.get_default_types(METHOD_MAIL), {'file_changed'})
        self.assertEqual(self.manager.get_default_types(METHOD_STREAM), set())

    def test_first_answer_wins(self):
        """Test that the first non-None answer is returned."""
        self.assertEqual(self.manager.get_type_icon('file_changed'), 'icon-files')
        self.assertEqual(
            self.manager.translate('files', 'file_changed', ['alice', 'a.txt'], False, False, 'en'),
            'alice changed a.txt'
        )
        self.assertEqual(self.manager.get_special_parameter_list('files', 'x'), ['username', 'file'])
        self.assertEqual(
            self.manager.get_query_for_filter('files'),
            QueryFilter('`app` = %s', ('files',))
        )

    def test_earlier_extension_takes_precedence(self):
        first = Mock()
        first.get_type_icon.return_value = 'icon-first'
        second = Mock()
        second.get_type_icon.return_value = 'icon-second'
        manager = ActivityManager()
        manager.register(first)
        manager.register(second)

        self.assertEqual(manager.get_type_icon('x'), 'icon-first')
        second.get_type_icon.assert_not_called()

    def test_not_applicable_everywhere(self):
        self.assertIsNone(self.manager.translate('dav', 'calendar_add', ['a', 'b'], False, False, 'en'))
        self.assertIsNone(self.manager.get_query_for_filter('calendar'))

    def test_translate_record(self):
        record = ActivityRecord(app='files', subject='file_changed', params=('alice', 'a.txt'))
        self.assertEqual(self.manager.translate_record(record), 'alice changed a.txt')
        self.assertEqual(self.manager.get_group_parameter(record), 1)

    def test_navigation_is_collected(self):
        navigation = self.manager.get_navigation('en')
        self.assertEqual([entry.id for entry in navigation.top], ['files'])
        self.assertEqual(navigation.apps, ())

    def test_is_filter_valid(self):
        self.assertTrue(self.manager.is_filter_valid('files'))
        self.assertFalse(self.manager.is_filter_valid('calendar'))

    def test_filter_notification_types(self):
        types = ['file_changed', 'calendar']
        self.assertEqual(self.manager.filter_notification_types(types, 'files'), {'file_changed'})

    def test_filter_notification_types_unknown_filter_keeps_types(self):
        types = ['file_changed', 'calendar']
        self.assertEqual(self.manager.filter_notification_types(types, 'other'), set(types))

    def test_extension_error_propagates(self):
        broken = Mock()
        broken.get_type_icon.side_effect = RuntimeError("boom")
        manager = ActivityManager()
        manager.register(broken)

        with self.assertRaises(RuntimeError):
            manager.get_type_icon('x')


class L10NTestCase(TestCase):
    """Test the localization collaborator."""

    def test_named_params(self):
        l10n = L10NFactory().get('dav', 'en')
        self.assertEqual(l10n.t('%(actor)s was here', {'actor': 'alice'}), 'alice was here')

    def test_positional_params(self):
        l10n = L10NFactory().get('dav', 'en')
        self.assertEqual(l10n.t('%s and %s', ['alice', 'bob']), 'alice and bob')

    def test_without_params(self):
        l10n = L10NFactory().get('dav', 'en')
        self.assertEqual(l10n.t('Calendar'), 'Calendar')

    def test_default_language(self):
        """Test that the active language is used when none is requested."""
        l10n = L10NFactory().get('dav')
        self.assertEqual(l10n.language_code, 'en')
        self.assertEqual(l10n.app, 'dav')


class URLGeneratorTestCase(TestCase):
    """Test the URL-building collaborator."""

    def test_link_to_route_with_params(self):
        url = URLGenerator().link_to_route('activity-list', {'filter': 'calendar'})
        self.assertEqual(url, '/activity/?filter=calendar')

    def test_link_to_route_without_params(self):
        self.assertEqual(URLGenerator().link_to_route('activity-list'), '/activity/')

    def test_unknown_route(self):
        with self.assertRaises(NoReverseMatch):
            URLGenerator().link_to_route('no-such-route')


class ValueTypesTestCase(TestCase):
    """Test the value types."""

    def test_filter_descriptor(self):
        descriptor = FilterDescriptor('calendar')
        self.assertEqual(descriptor.apply(['calendar', 'files']), {'calendar'})
        self.assertEqual(descriptor.apply([]), set())

    def test_navigation_to_dict(self):
        entry = NavigationEntry('calendar', 'icon-calendar-dark', 'Calendar', '/activity/?filter=calendar')
        self.assertEqual(
            Navigation(apps=(entry,)).to_dict(),
            {
                'top': [],
                'apps': [{
                    'id': 'calendar',
                    'icon': 'icon-calendar-dark',
                    'name': 'Calendar',
                    'url': '/activity/?filter=calendar',
                }],
            }
        )
