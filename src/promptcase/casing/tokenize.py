"""Unicode-aware tokenizer shared by every case style.

Pipeline: coerce -> NFKD + strip combining marks -> split case boundaries
-> collapse non letter/number runs -> split, dropping empties.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Any

from promptcase.helpers import coerce_text

_SEP = " "

# [^\W_] is exactly the Unicode letters and numbers (str.isalnum).
_DELIMITER_RE = re.compile(r"[\W_]+")


@dataclass(frozen=True)
class Token:
    text: str
    is_acronym: bool = False


def strip_diacritics(text: str) -> str:
    """NFKD-decompose and drop combining marks (e.g. café -> cafe, ﬁ -> fi)."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))


def split_case_boundaries(text: str) -> str:
    """Insert a separator at camel/Pascal boundaries.

    fooBar -> foo Bar, v2Api -> v2 Api, XMLHttp -> XML Http, APIV2 -> APIV 2.
    """
    out: list[str] = []
    last = len(text) - 1
    for i, ch in enumerate(text):
        prev = text[i - 1] if i else ""
        if ch.isupper():
            if prev.islower() or prev.isdigit():
                out.append(_SEP)
            elif prev.isupper() and i < last and text[i + 1].islower():
                out.append(_SEP)
        elif ch.isdigit() and prev.isupper():
            out.append(_SEP)
        out.append(ch)
    return "".join(out)


def is_acronym(word: str) -> bool:
    """True for words of two or more characters that are all uppercase letters (category Lu)."""
    return len(word) > 1 and all(unicodedata.category(ch) == "Lu" for ch in word)


def split_words(value: Any) -> list[str]:
    """Raw words of value in input order, original casing kept. Never contains empty strings."""
    text = strip_diacritics(coerce_text(value))
    text = split_case_boundaries(text)
    text = _DELIMITER_RE.sub(_SEP, text)
    return [w for w in text.split(_SEP) if w]


def tokenize(value: Any, preserve_acronyms: bool = False) -> list[Token]:
    """Tokens of value, acronym-tagged only when preserve_acronyms is set."""
    return [
        Token(word, preserve_acronyms and is_acronym(word)) for word in split_words(value)
    ]
