#!/usr/bin/env python3
"""
slugify.py
----------
Label slugification for taxonomy and calendar identifiers.

Converts free-form labels (tags, categories, dates) into the canonical,
URL-safe slug used to merge groups and build page URLs.

Key Features:
    - Lowercase transformation
    - Accent/diacritic folding (Café → cafe); other scripts are kept
    - Removal of & , + ( ) $ ~ % . ' " : * ? < > { }
    - Whitespace and hyphen runs collapsed to a single hyphen
    - Idempotent: str_to_slug(str_to_slug(x)) == str_to_slug(x)

Usage:
    from almanac.utils.slugify import str_to_slug

    str_to_slug("Book Reviews")  # "book-reviews"
    str_to_slug("C++ (Advanced)")  # "c-advanced"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata


REMOVED_CHARACTERS = re.compile(r"""[&,+()$~%.'":*?<>{}]""")
SEPARATORS = re.compile(r"[\s-]+")


def _fold_accents(text: str) -> str:
    """Decompose and drop combining marks, keeping base characters."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def str_to_slug(label: str) -> str:
    """
    Convert a label to its canonical slug.

    Args:
        label: Human-readable label

    Returns:
        Lowercase slug with punctuation removed and separators collapsed

    Examples:
        >>> str_to_slug("Book Reviews")
        'book-reviews'
        >>> str_to_slug("Rock & Roll")
        'rock-roll'
        >>> str_to_slug("Café  au   lait")
        'cafe-au-lait'
        >>> str_to_slug("2024-01-15")
        '2024-01-15'
    """
    if not label:
        return ""

    text = _fold_accents(label.lower()).lower()
    text = REMOVED_CHARACTERS.sub("", text)
    return SEPARATORS.sub("-", text.strip())
