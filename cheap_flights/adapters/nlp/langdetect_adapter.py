"""Whitelist-restricted language detection on top of langdetect.

langdetect scores every language it has a profile for. Short Cyrillic
messages such as "Киев Рим" often put all the mass on Bulgarian or
Macedonian, and the public ``detect_langs`` drops anything below 0.1.
Instead, each detector gets a prior map that gives zero weight to
languages outside the whitelist, so only supported languages can
collect probability.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, FrozenSet, List

from langdetect import PROFILES_DIRECTORY, DetectorFactory, LangDetectException
from langdetect.language import Language

from ...config import LocalizationConfig, get_config


@lru_cache(maxsize=1)
def _factory() -> DetectorFactory:
    """Load the bundled language profiles once per process."""
    factory = DetectorFactory()
    factory.load_profile(PROFILES_DIRECTORY)
    # langdetect is randomized; a fixed seed makes results reproducible
    factory.set_seed(0)
    return factory


@dataclass
class LangDetectLanguageDetector:
    """Language detector returning a tag from the supported set.

    Attributes:
        config: Localization configuration (whitelist, default, threshold)
    """

    config: LocalizationConfig = field(
        default_factory=lambda: get_config().localization
    )

    _whitelist: FrozenSet[str] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._whitelist = frozenset(self.config.supported_languages)

    @property
    def default_language(self) -> str:
        return self.config.default_language

    def _candidates(self, text: str) -> List[Language]:
        detector = _factory().create()
        detector.set_prior_map({lang: 1.0 for lang in self._whitelist})
        detector.append(text)
        return detector.get_probabilities()

    def scores(self, text: str) -> Dict[str, float]:
        """Return probabilities of the supported languages.

        Args:
            text: The text to analyze.

        Returns:
            Mapping of language tag to probability; empty when none of
            the supported languages was detected.
        """
        if not text or not text.strip():
            return {}

        try:
            candidates = self._candidates(text)
        except LangDetectException as e:
            self._logger.debug(
                "Language detection failed",
                extra={"text_length": len(text), "error": str(e)},
            )
            return {}

        kept = {c.lang: c.prob for c in candidates if c.lang in self._whitelist}
        total = sum(kept.values())
        if total <= 0:
            return {}
        return {lang: prob / total for lang, prob in kept.items()}

    def detect(self, text: str) -> str:
        """Detect the language of a text.

        Args:
            text: The text to analyze.

        Returns:
            The most probable supported tag, or the default tag when no
            supported language reaches the confidence threshold.
        """
        scores = self.scores(text)
        if not scores:
            return self.default_language

        lang, prob = max(scores.items(), key=lambda item: item[1])
        if prob < self.config.min_confidence:
            self._logger.debug(
                "Low language confidence, using default",
                extra={"lang": lang, "prob": prob},
            )
            return self.default_language

        self._logger.debug("Language detected", extra={"lang": lang, "prob": prob})
        return lang
