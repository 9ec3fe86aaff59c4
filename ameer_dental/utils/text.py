"""
Text processing utilities.
"""

import re


class TextProcessor:
    """Text processing utilities."""

    @staticmethod
    def normalize_arabic_text(text: str) -> str:
        """Normalize Arabic text for matching."""
        if not isinstance(text, str):
            text = str(text or "")

        text = text.strip()
        text = re.sub("[ًٌٍَُِّْـ]", "", text)
        text = text.replace("أ", "ا").replace("إ", "ا").replace("آ", "ا")
        text = text.replace("ى", "ي").replace("ة", "ه")
        return re.sub(r"\s+", " ", text).lower()

    @staticmethod
    def contains(haystack: str, needle: str) -> bool:
        """Case-insensitive, Arabic-normalized substring check."""
        return TextProcessor.normalize_arabic_text(needle) in TextProcessor.normalize_arabic_text(haystack)

    @staticmethod
    def sanitize_text(text: str) -> str:
        """Strip control characters and collapse whitespace."""
        if not text:
            return ""

        text = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]", "", text)
        text = re.sub(r"\s+", " ", text)

        return text.strip()
