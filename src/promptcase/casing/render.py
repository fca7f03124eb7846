"""Render token sequences into case styles: camelCase, PascalCase, kebab-case, dot.case."""

from __future__ import annotations

from typing import Any

from promptcase.casing.options import (
    DEFAULT_DIGIT_PREFIX,
    ConversionOptions,
    ResolvedOptions,
    Style,
    resolve_options,
)
from promptcase.casing.tokenize import Token, tokenize


def capitalize(word: str) -> str:
    """First character upper, rest lower. Unlike str.capitalize, no titlecase mapping."""
    return word[:1].upper() + word[1:].lower()


def _render_camel(tokens: list[Token], pascal: bool) -> str:
    first, rest = tokens[0], tokens[1:]
    parts: list[str] = []
    if first.is_acronym:
        parts.append(first.text)
    else:
        parts.append(capitalize(first.text) if pascal else first.text.lower())
    parts.extend(tok.text if tok.is_acronym else capitalize(tok.text) for tok in rest)
    return "".join(parts)


def _render_joined(tokens: list[Token], resolved: ResolvedOptions) -> str:
    words = (
        tok.text if tok.is_acronym or not resolved.lowercase else tok.text.lower()
        for tok in tokens
    )
    return resolved.style.separator.join(words)


def _apply_digit_prefix(result: str, prefix: str | None) -> str:
    if prefix is not None and result[:1].isdecimal():
        return prefix + result
    return result


def convert(
    value: Any,
    options: ConversionOptions | None = None,
    style: Style | str = Style.CAMEL,
) -> str:
    """Convert value to style. Never raises for any value; an unknown style name raises ValueError."""
    resolved = resolve_options(style, options)
    tokens = tokenize(value, preserve_acronyms=resolved.preserve_acronyms)
    if not tokens:
        return ""
    if resolved.style in (Style.CAMEL, Style.PASCAL):
        result = _render_camel(tokens, pascal=resolved.style is Style.PASCAL)
        return _apply_digit_prefix(result, resolved.digit_prefix)
    return _render_joined(tokens, resolved)


def to_camel_case(
    value: Any,
    *,
    pascal_case: bool = False,
    preserve_acronyms: bool = True,
    digit_prefix: Any = DEFAULT_DIGIT_PREFIX,
) -> str:
    """Convert value to camelCase (or PascalCase with pascal_case=True).

    Examples:
        >>> to_camel_case("hello world")
        'helloWorld'
        >>> to_camel_case("XML_HTTP request")
        'XMLHTTPRequest'
        >>> to_camel_case("XML http request", preserve_acronyms=False)
        'xmlHttpRequest'
        >>> to_camel_case("123 abc")
        '_123Abc'
    """
    options = ConversionOptions(
        pascal_case=pascal_case,
        preserve_acronyms=preserve_acronyms,
        digit_prefix=digit_prefix,
    )
    return convert(value, options, Style.CAMEL)


def to_pascal_case(
    value: Any,
    *,
    preserve_acronyms: bool = True,
    digit_prefix: Any = DEFAULT_DIGIT_PREFIX,
) -> str:
    """Convert value to PascalCase (e.g. my-service -> MyService)."""
    return to_camel_case(
        value,
        pascal_case=True,
        preserve_acronyms=preserve_acronyms,
        digit_prefix=digit_prefix,
    )


def to_dot_case(value: Any, *, preserve_acronyms: bool = False, lowercase: bool = True) -> str:
    """Convert value to dot.case. Leading digits are left as they are."""
    options = ConversionOptions(preserve_acronyms=preserve_acronyms, lowercase=lowercase)
    return convert(value, options, Style.DOT)


def to_kebab_case(value: Any) -> str:
    """Convert value to kebab-case. Always lowercase; no acronym or digit-prefix handling."""
    return convert(value, None, Style.KEBAB)
