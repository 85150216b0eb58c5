"""City name translation through the Wikidata knowledge graph.

The query looks for an item whose label in the source language matches
the city, keeps items that have an article on Russian Wikipedia, and
asks for the item's Russian label.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.errors import TranslationNotFoundError
from ..ports.knowledge_base import KnowledgeBaseClient

TARGET_LANGUAGE = "ru"

TRANSLATE_QUERY = """
SELECT distinct ?itemLabel
WHERE{{
  ?item ?label "{city}"@{lang}.
  ?article schema:about ?item .
  ?article schema:inLanguage "{target}" .
  ?article schema:isPartOf <https://{target}.wikipedia.org/>.
  SERVICE wikibase:label {{ bd:serviceParam wikibase:language "{target}". }}
}}
LIMIT 1
"""

HEADER = "itemLabel"


def build_query(source_language: str, city: str, target: str = TARGET_LANGUAGE) -> str:
    """Render the SPARQL query for a city label.

    Labels are matched title-cased ("new york" -> "New York").
    """
    escaped = city.strip().title().replace("\\", "\\\\").replace('"', '\\"')
    return TRANSLATE_QUERY.format(
        city=escaped,
        lang=source_language.strip().lower(),
        target=target,
    )


def parse_output(body: str) -> str:
    """Strip the CSV header and line terminators from a one-column result."""
    return body.replace(HEADER, "").replace("\r\n", "").replace("\n", "").strip()


@dataclass
class CityTranslator:
    """Translate city names; every call queries the knowledge base.

    Attributes:
        client: Knowledge base used for the lookup
        target_language: Language of the returned label
    """

    client: KnowledgeBaseClient
    target_language: str = TARGET_LANGUAGE

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def translate(self, source_language: str, city: str) -> str:
        """Return the canonical city name in the target language.

        Raises:
            TranslationNotFoundError: If the query returns no rows.
            TransportError: If the knowledge base could not be reached.
        """
        query = build_query(source_language, city, self.target_language)
        result = parse_output(self.client.query_csv(query))

        if not result:
            self._logger.info(
                "City translation not found",
                extra={"city": city, "lang": source_language},
            )
            raise TranslationNotFoundError(
                "not found", city=city, language=source_language
            )

        self._logger.debug(
            "City translated",
            extra={"city": city, "lang": source_language, "result": result},
        )
        return result
