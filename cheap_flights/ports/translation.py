"""Translation port - Abstraction for free-text machine translation."""

from __future__ import annotations

from typing import Protocol


class TextTranslatorPort(Protocol):
    """Port for translating reply templates.

    Implementation: adapters/translation/google_translate_adapter.py
    """

    def translate(self, text: str, source: str, target: str) -> str:
        """Translate text between languages.

        Args:
            text: Text to translate.
            source: Source language tag, or 'auto'.
            target: Target language tag.

        Returns:
            The translated text.
        """
        ...
