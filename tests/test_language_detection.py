"""Tests for whitelist-restricted language detection."""

from unittest.mock import patch

import pytest
from langdetect import LangDetectException
from langdetect.language import Language

from cheap_flights.adapters.nlp.langdetect_adapter import LangDetectLanguageDetector
from cheap_flights.config import LocalizationConfig


@pytest.fixture
def detector():
    return LangDetectLanguageDetector(
        LocalizationConfig(
            supported_languages=["en", "ru"],
            default_language="en",
            min_confidence=0.5,
        )
    )


ENGLISH_TEXTS = [
    "I would like to fly from London to New York next week",
    "Find me the cheapest tickets from Berlin to Paris please",
]

RUSSIAN_TEXTS = [
    "Хочу улететь из Москвы в Санкт-Петербург на следующей неделе",
    "Найди мне самые дешевые билеты из Киева в Таллин пожалуйста",
]


@pytest.mark.parametrize("text", ENGLISH_TEXTS)
def test_detect_english(detector, text):
    assert detector.detect(text) == "en"


@pytest.mark.parametrize("text", RUSSIAN_TEXTS)
def test_detect_russian(detector, text):
    assert detector.detect(text) == "ru"


@pytest.mark.parametrize(
    "text",
    ["", "   ", "\n\n", "123", "@#$", "Wo ist der nächste Bahnhof?", "asdfghjkl"],
)
def test_always_returns_supported_tag(detector, text):
    assert detector.detect(text) in {"en", "ru"}


@pytest.mark.parametrize("text", ["Киев Рим", "Киев Таллин", "Минск Берлин", "Москва Сочи"])
def test_short_cyrillic_city_pairs_are_russian(detector, text):
    assert detector.detect(text) == "ru"


@pytest.mark.parametrize("text", ["Kiev Rome", "London Paris"])
def test_short_latin_city_pairs_are_english(detector, text):
    assert detector.detect(text) == "en"


def test_only_supported_languages_get_probability(detector):
    scores = detector.scores("Киев Рим")
    assert set(scores) <= {"en", "ru"}
    assert scores["ru"] > 0.5


def test_scores_renormalized_among_supported(detector):
    with patch.object(
        LangDetectLanguageDetector,
        "_candidates",
        return_value=[Language("ru", 0.6), Language("en", 0.2)],
    ):
        scores = detector.scores("Киев Таллин")
    assert set(scores) == {"ru", "en"}
    assert scores["ru"] == pytest.approx(0.75)


def test_no_supported_candidate_gives_default(detector):
    assert detector_detect(detector, [Language("de", 0.99)]) == "en"


def test_low_confidence_gives_default():
    detector = LangDetectLanguageDetector(
        LocalizationConfig(supported_languages=["en", "ru"], default_language="ru", min_confidence=0.9)
    )
    assert detector_detect(detector, [Language("en", 0.5), Language("ru", 0.5)]) == "ru"


def test_detector_exception_gives_default(detector):
    with patch.object(
        LangDetectLanguageDetector,
        "_candidates",
        side_effect=LangDetectException(0, "No features in text."),
    ):
        assert detector.detect("!!!") == "en"


def test_unknown_whitelist_gives_default():
    detector = LangDetectLanguageDetector(
        LocalizationConfig(supported_languages=["xx"], default_language="en")
    )
    assert detector.detect("Киев Рим") == "en"


def detector_detect(detector, candidates):
    with patch.object(LangDetectLanguageDetector, "_candidates", return_value=candidates):
        return detector.detect("some text")
