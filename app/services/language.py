"""
Heuristic detection of the student's language.

Rules are tried in order and the first hit wins. Accented character sets
overlap between languages (à, é, ç ...), so an earlier rule always shadows a
later one for those characters.
"""

import re
from enum import Enum
from typing import Callable, List, Optional, Tuple


class Language(str, Enum):
    PORTUGUESE = "Portuguese"
    SPANISH = "Spanish"
    ITALIAN = "Italian"
    FRENCH = "French"
    ENGLISH = "English"


def _rule(chars: str, words: List[str]) -> Callable[[str], bool]:
    char_class = re.compile(f"[{re.escape(chars)}]")
    keywords = re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")

    def matches(low: str) -> bool:
        return bool(char_class.search(low) or keywords.search(low))

    return matches


RULES: List[Tuple[Callable[[str], bool], Language]] = [
    (
        _rule("ãõáéíóúâêôàç", ["artigos", "quando", "como", "porque", "por que"]),
        Language.PORTUGUESE,
    ),
    (
        _rule("ñáéíóú¡¿", ["artículos", "cuándo", "cómo", "por qué"]),
        Language.SPANISH,
    ),
    (
        _rule("àèéìòóùçîïë", ["perché", "quando", "come", "articoli"]),
        Language.ITALIAN,
    ),
    (
        _rule("àâçéèêîïôûù", ["pourquoi", "quand", "comment", "articles"]),
        Language.FRENCH,
    ),
]


def detect_language(text: Optional[str]) -> Language:
    low = (text or "").strip().lower()

    for matches, language in RULES:
        if matches(low):
            return language

    return Language.ENGLISH
