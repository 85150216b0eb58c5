"""Knowledge base port - Abstraction for tabular graph queries."""

from __future__ import annotations

from typing import Protocol


class KnowledgeBaseClient(Protocol):
    """Port for knowledge-base queries.

    Implementation: adapters/knowledge_base/wikidata_adapter.py
    """

    def query_csv(self, query: str) -> str:
        """Run a query and return the raw CSV body, header row included.

        Args:
            query: SPARQL query text.

        Returns:
            The response body as text.
        """
        ...
