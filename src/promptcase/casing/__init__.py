"""Case conversion: camelCase, PascalCase, kebab-case, dot.case over one Unicode-aware tokenizer."""

from .options import (
    STYLE_PROFILES,
    ConversionOptions,
    ResolvedOptions,
    Style,
    resolve_options,
)
from .render import (
    capitalize,
    convert,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_pascal_case,
)
from .tokenize import Token, is_acronym, split_words, tokenize

__all__ = [
    "STYLE_PROFILES",
    "ConversionOptions",
    "ResolvedOptions",
    "Style",
    "Token",
    "capitalize",
    "convert",
    "is_acronym",
    "resolve_options",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_pascal_case",
    "tokenize",
]
