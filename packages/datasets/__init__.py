from .corpus import UnsupportedLanguageError, load_words, supported_languages
from .validator import validate_corpus, pretty_summary

__all__ = ["UnsupportedLanguageError", "load_words", "supported_languages", "validate_corpus", "pretty_summary"]
