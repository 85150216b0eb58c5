"""Translation adapters - Implementations of TextTranslatorPort.

Available implementations:
- GoogleTranslateClient: keyless translate.googleapis.com endpoint
"""

from .google_translate_adapter import GoogleTranslateClient

__all__ = ["GoogleTranslateClient"]
