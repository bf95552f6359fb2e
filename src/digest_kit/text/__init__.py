from .normalize import clean_text, normalize_diacritics

__all__ = [
    "clean_text",
    "normalize_diacritics",
]
