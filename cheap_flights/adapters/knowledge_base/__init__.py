"""Knowledge base adapters - Implementations of KnowledgeBaseClient.

Available implementations:
- WikidataSparqlClient: Wikidata Query Service, CSV output
"""

from .wikidata_adapter import WikidataSparqlClient

__all__ = ["WikidataSparqlClient"]
