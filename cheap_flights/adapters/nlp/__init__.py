"""NLP adapters - Implementations of LanguageDetector.

Available implementations:
- LangDetectLanguageDetector: langdetect restricted to a whitelist
"""

from .langdetect_adapter import LangDetectLanguageDetector

__all__ = ["LangDetectLanguageDetector"]
