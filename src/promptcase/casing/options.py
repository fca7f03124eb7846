"""Conversion options and per-style default profiles.

Each style has its own profile of defaults:
- camel / pascal: keep acronyms, prefix "_" when the result starts with a digit
- dot: lowercase everything, acronyms off by default, no digit guard
- kebab: always lowercase; no acronym or digit-prefix support at all
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DIGIT_PREFIX = "_"


class Style(str, Enum):
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    DOT = "dot"

    @property
    def separator(self) -> str:
        return _SEPARATORS[self]


_SEPARATORS: dict[Style, str] = {
    Style.CAMEL: "",
    Style.PASCAL: "",
    Style.KEBAB: "-",
    Style.DOT: ".",
}


@dataclass(frozen=True)
class ConversionOptions:
    """Caller-facing options. None on preserve_acronyms means "use the style default".

    digit_prefix: False or None disables the guard, True means the default "_",
    any other non-str value is stringified.
    pascal_case only applies to camel; dot and kebab ignore it.
    """

    pascal_case: bool = False
    preserve_acronyms: bool | None = None
    digit_prefix: Any = DEFAULT_DIGIT_PREFIX
    lowercase: bool = True


@dataclass(frozen=True)
class ResolvedOptions:
    """Options after merging with a style profile. Only built by resolve_options."""

    style: Style
    preserve_acronyms: bool
    digit_prefix: str | None
    lowercase: bool


STYLE_PROFILES: dict[Style, dict[str, Any]] = {
    Style.CAMEL: {"preserve_acronyms": True, "digit_guard": True},
    Style.PASCAL: {"preserve_acronyms": True, "digit_guard": True},
    Style.DOT: {"preserve_acronyms": False, "digit_guard": False},
    Style.KEBAB: {"preserve_acronyms": False, "digit_guard": False, "fixed": True},
}


def _normalize_digit_prefix(value: Any) -> str | None:
    if value is None or value is False:
        return None
    if value is True:
        return DEFAULT_DIGIT_PREFIX
    return value if isinstance(value, str) else str(value)


def resolve_options(
    style: Style | str,
    options: ConversionOptions | None = None,
) -> ResolvedOptions:
    """Merge caller options over the style profile. Raises ValueError for an unknown style name.

    pascal_case on a camel request upgrades the style to PASCAL.
    """
    style = Style(style)
    if options is None:
        options = ConversionOptions()
    if style is Style.CAMEL and options.pascal_case:
        style = Style.PASCAL
    elif options.pascal_case and style is not Style.PASCAL:
        logger.debug("pascal_case ignored for %s style", style.value)
    profile = STYLE_PROFILES[style]

    if profile.get("fixed"):
        if options.preserve_acronyms:
            logger.debug("preserve_acronyms ignored for %s style", style.value)
        if _normalize_digit_prefix(options.digit_prefix) not in (None, DEFAULT_DIGIT_PREFIX):
            logger.debug("digit_prefix ignored for %s style", style.value)
        if not options.lowercase:
            logger.debug("lowercase=False ignored for %s style", style.value)
        return ResolvedOptions(
            style=style, preserve_acronyms=False, digit_prefix=None, lowercase=True
        )

    preserve = options.preserve_acronyms
    if preserve is None:
        preserve = profile["preserve_acronyms"]
    digit_prefix = (
        _normalize_digit_prefix(options.digit_prefix) if profile["digit_guard"] else None
    )
    return ResolvedOptions(
        style=style,
        preserve_acronyms=bool(preserve),
        digit_prefix=digit_prefix,
        lowercase=options.lowercase,
    )
