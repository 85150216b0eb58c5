"""Integration tests for the search pipeline with canned collaborators."""

from datetime import datetime

import pytest

from conftest import (
    CannedKnowledgeBase,
    FakeFareSource,
    FixedLanguage,
    FixedRate,
    StaticResolver,
    fare,
)

from cheap_flights.domain.errors import (
    AirportsNotResolvedError,
    ResponseParseError,
    TransportError,
)
from cheap_flights.locales import EN, RU
from cheap_flights.services import (
    CityTranslator,
    FlightSearchService,
    PresentationFormatter,
    PriceAggregator,
)


class EchoTranslator:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def translate(self, text, source, target):
        self.calls.append((text, source, target))
        if self.error is not None:
            raise self.error
        return f"[{target}] {text}"


def build_service(
    language="ru",
    resolver=None,
    source=None,
    rate=None,
    knowledge_base=None,
    text_translator=None,
    max_results=5,
):
    return FlightSearchService(
        language_detector=FixedLanguage(language),
        airport_resolver=resolver or StaticResolver(),
        price_aggregator=PriceAggregator(
            source or FakeFareSource([fare(300), fare(100)]),
            clock=lambda: datetime(2020, 1, 9),
        ),
        formatter=PresentationFormatter(rate or FixedRate(0.0), max_results=max_results),
        city_translator=CityTranslator(knowledge_base) if knowledge_base else None,
        text_translator=text_translator,
    )


def test_successful_search_replies():
    replies = build_service().search("Киев Таллин")

    assert replies[0] == "Киев ➡️ Таллин"
    assert replies[1] == RU.results_header(2, 5)
    assert replies[2].startswith("💶 100 ₽")
    assert len(replies[2].split("\n\n")) == 2


def test_results_header_counts_all_options():
    source = FakeFareSource([fare(p) for p in range(8)])
    replies = build_service(language="en", source=source, max_results=3).search("Kiev Tallinn")

    assert replies[1] == "Total results: 8, showing up to 3 best:"
    assert len(replies[2].split("\n\n")) == 3


def test_nothing_found_is_informational():
    replies = build_service(source=FakeFareSource([])).search("Киев Таллин")
    assert replies == ["Киев ➡️ Таллин", RU.nothing_found]


@pytest.mark.parametrize(
    "error, replies",
    [
        (AirportsNotResolvedError("not resolved"), [EN.airport_data_error, EN.help_instructions]),
        (ResponseParseError("Malformed JSON body"), [EN.parse_error]),
        (TransportError("Request failed"), [EN.request_error]),
    ],
)
def test_airport_failures_map_to_messages(error, replies):
    service = build_service(language="en", resolver=StaticResolver(error=error))
    assert service.search("Kiev Tallinn") == replies


@pytest.mark.parametrize(
    "error",
    [TransportError("Request failed"), ResponseParseError("Malformed JSON body")],
)
def test_price_failures_map_to_request_error(error):
    service = build_service(source=FakeFareSource(error=error))
    assert service.search("Киев Таллин") == ["Киев ➡️ Таллин", RU.request_error]


def test_cities_translated_before_resolution():
    resolver = StaticResolver()
    kb = CannedKnowledgeBase(
        {
            "Kiev": "itemLabel\r\nКиев\r\n",
            "Tallinn": "itemLabel\r\nТаллин\r\n",
        }
    )
    build_service(language="en", resolver=resolver, knowledge_base=kb).search("from Kiev to Tallinn!")

    assert resolver.queries == ["from Киев to Таллин"]
    assert len(kb.queries) == 2


def test_untranslatable_words_stay_as_typed():
    resolver = StaticResolver()
    kb = CannedKnowledgeBase({"Kiev": "itemLabel\r\nКиев\r\n"})
    build_service(language="en", resolver=resolver, knowledge_base=kb).search("Kiev Shoshosho")

    assert resolver.queries == ["Киев Shoshosho"]


def test_multi_word_city_translated_as_one_name():
    resolver = StaticResolver()
    kb = CannedKnowledgeBase(
        {
            "New York": "itemLabel\r\nНью-Йорк\r\n",
            "York": "itemLabel\r\nЙорк\r\n",
            "Kiev": "itemLabel\r\nКиев\r\n",
        }
    )
    build_service(language="en", resolver=resolver, knowledge_base=kb).search("new york kiev")

    assert resolver.queries == ["Нью-Йорк Киев"]
    assert '"New York Kiev"@en' in kb.queries[0]


def test_lookups_do_not_cross_punctuation_or_stopwords():
    kb = CannedKnowledgeBase({"Kiev": "itemLabel\r\nКиев\r\n"})
    service = build_service(language="en", knowledge_base=kb)

    assert service.translate_cities("en", "cheap tickets Kiev, Tallinn") == "cheap tickets Киев Tallinn"
    assert len(kb.queries) == 2


def test_knowledge_base_outage_keeps_text():
    resolver = StaticResolver()
    kb = CannedKnowledgeBase(error=TransportError("Request failed"))
    build_service(language="en", resolver=resolver, knowledge_base=kb).search("Kiev Tallinn")

    assert resolver.queries == ["Kiev Tallinn"]


def test_no_translation_in_suggest_language():
    resolver = StaticResolver()
    kb = CannedKnowledgeBase()
    build_service(language="ru", resolver=resolver, knowledge_base=kb).search("Киев Таллин")

    assert resolver.queries == ["Киев Таллин"]
    assert kb.queries == []


def test_help_in_detected_language():
    assert build_service(language="ru").help("Привет") == RU.help
    assert build_service(language="en").help("Hello") == EN.help


def test_language_without_bundle_is_machine_translated():
    translator = EchoTranslator()
    service = build_service(language="de", text_translator=translator)

    assert service.help("Hallo") == f"[de] {EN.help}"
    assert translator.calls == [(EN.help, "auto", "de")]


def test_machine_translation_failure_returns_default_text():
    service = build_service(
        language="de", text_translator=EchoTranslator(error=TransportError("cooldown"))
    )
    assert service.help("Hallo") == EN.help


def test_supported_language_never_machine_translated():
    translator = EchoTranslator()
    build_service(language="ru", text_translator=translator).search("Киев Таллин")
    assert translator.calls == []
