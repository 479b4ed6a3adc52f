"""
Localization for activity extensions.

Wraps Django's translation machinery so extensions can render strings for a
language other than the one active for the current request (e.g. when
activity emails are sent in each recipient's language).
"""

import logging
from typing import Mapping, Optional, Sequence, Union

from django.conf import settings
from django.utils import translation

logger = logging.getLogger(__name__)

Params = Union[Mapping[str, object], Sequence[object], None]


class L10N:
    """Translator bound to one app and one language."""

    def __init__(self, app: str, language_code: str):
        self.app = app
        self.language_code = language_code

    def t(self, text: str, params: Params = None) -> str:
        """
        Translate ``text`` and substitute ``params`` into it.
        
        Args:
            text: Message id, using ``%(name)s`` or ``%s`` placeholders
            params: Mapping for named placeholders, sequence for positional ones
            
        Returns:
            The translated, formatted string
            
        Example:
            >>> l10n.t('%(actor)s created calendar %(calendar)s',
            ...        {'actor': 'alice', 'calendar': 'Work'})
            'alice created calendar Work'
        """
        with translation.override(self.language_code):
            translated = translation.gettext(text)

        if params is None:
            return translated
        if isinstance(params, Mapping):
            return translated % params
        return translated % tuple(params)

    def __repr__(self):
        return f"L10N(app={self.app!r}, language_code={self.language_code!r})"


class L10NFactory:
    """Hands out translators for an app and a language."""

    def get(self, app: str, language_code: Optional[str] = None) -> L10N:
        """
        Get a translator.
        
        Args:
            app: App whose messages are translated
            language_code: Requested language; None uses the active language
            
        Returns:
            L10N instance for the resolved language
        """
        if not language_code:
            language_code = translation.get_language() or settings.LANGUAGE_CODE
        logger.debug(f"Translator requested for {app} in {language_code}")
        return L10N(app, language_code)
