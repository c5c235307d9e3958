from porterstem.stemming import Stemmer, stem

__all__ = ["Stemmer", "stem"]
