"""Best-effort translation of free-form reply text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import FlightsBotError
from ..ports.translation import TextTranslatorPort


@dataclass
class Localizer:
    """Translate text into the active language.

    The translation endpoint has a cooldown, so failures return the
    input unchanged.

    Attributes:
        translator: Machine translation backend
        language: Target language tag
    """

    translator: TextTranslatorPort
    language: str

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def text(self, value: str) -> str:
        try:
            return self.translator.translate(value, "auto", self.language)
        except FlightsBotError as e:
            self._logger.warning(
                "Failed to translate text",
                extra={"lang": self.language, "error": str(e)},
            )
            return value
