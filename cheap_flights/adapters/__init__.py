"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Airport suggestion (Travelpayouts)
- Fare calendar (Aviasales)
- Exchange rates (currencyconverterapi)
- Language detection (langdetect)
- Knowledge base queries (Wikidata SPARQL)
- Machine translation (Google Translate)
"""
