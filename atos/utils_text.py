# -*- coding: utf-8 -*-
"""
atos.utils_text

Shared text helpers.

Role
----
- normalize_lower(text): trim + lower-case, None-safe
- contains_any(text, keywords): True if any keyword is a substring
- fold_accents(text): strip diacritics and case-fold ("Órgãos" -> "orgaos")
- locale_sort_key(text): sort key that orders accented letters with their base letter

Only used by the other atos modules.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, Optional, Tuple


# ------------------------------------------------------------
# 1. Basic normalization
# ------------------------------------------------------------

def normalize_lower(text: Optional[str]) -> str:
    """Trim and lower-case. Keeps accents, so 'ADMINISTRAÇÃO' -> 'administração'."""
    if not text:
        return ""
    return text.strip().lower()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    True if any of keywords occurs in text.
    Assumes text was already normalized with normalize_lower.
    """
    if not text:
        return False

    return any(kw in text for kw in keywords)


# ------------------------------------------------------------
# 2. Ordering
# ------------------------------------------------------------

def fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def locale_sort_key(text: str) -> Tuple[str, str]:
    """
    Alphabetical key as a Portuguese reader expects it:
    primary comparison ignores accents and case ("Ó" sorts with "O"),
    the raw string breaks ties so the order is total.
    """
    return fold_accents(text), text
