"""Language port - Abstraction for language detection."""

from __future__ import annotations

from typing import Protocol


class LanguageDetector(Protocol):
    """Port for language detection.

    Implementation: adapters/nlp/langdetect_adapter.py

    Detection never fails: when nothing confident is found the
    implementation returns its default language tag.
    """

    def detect(self, text: str) -> str:
        """Detect the language of a text.

        Args:
            text: The text to analyze.

        Returns:
            A two-letter language tag from the supported set.
        """
        ...
