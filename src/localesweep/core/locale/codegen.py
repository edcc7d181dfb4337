from __future__ import annotations

"""
Locale and Type Code Generation.

Renders translation trees back into TypeScript source: locale modules as
exported object literals, and the translation type as a structural
interface mirroring the tree.
"""

import json
import re
from typing import Any

from localesweep.domain.constants import (
    DEFAULT_LANGUAGE_BLOCK,
    DEFAULT_TYPE_IMPORT,
    DEFAULT_TYPE_NAME,
    INDENT,
)
from localesweep.domain.models import TranslationTree

_IDENTIFIER_RX = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_LANGUAGE_BLOCK_RX = re.compile(r"export type Language[\s\S]*?;\n\n")

# -----------------------------------------------------------------------------
# OBJECT LITERALS
# -----------------------------------------------------------------------------

def quote_string(value: str) -> str:
    """Single-quote a string, escaping what would break the literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
    return f"'{escaped}'"


def format_key(key: str) -> str:
    """Emit a property key bare when it is an identifier, quoted otherwise."""
    return key if _IDENTIFIER_RX.match(key) else quote_string(key)


def to_ts_literal(value: Any, indent: int = 0) -> str:
    """
    Render a tree value as TypeScript literal source.

    Mappings span one property per line, indented two spaces per level.
    Arrays stay on a single line. Strings are single-quoted; other scalars
    use their JSON spelling.
    """
    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = INDENT * (indent + 1)
        inner = ",\n".join(
            f"{pad}{format_key(k)}: {to_ts_literal(v, indent + 1)}" for k, v in value.items()
        )
        return "{\n" + inner + "\n" + INDENT * indent + "}"
    if isinstance(value, list):
        return "[" + ", ".join(to_ts_literal(v, indent + 1) for v in value) + "]"
    if isinstance(value, str):
        return quote_string(value)
    return json.dumps(value)


def render_locale_module(
        export_name: str,
        tree: TranslationTree,
        type_name: str = DEFAULT_TYPE_NAME,
        type_import: str = DEFAULT_TYPE_IMPORT,
) -> str:
    """
    Render a complete locale module.

    Example:
        import type { TranslationKeys } from '../types/i18n';

        export const englishTranslations: TranslationKeys = {...};
    """
    header = f"import type {{ {type_name} }} from '{type_import}';\n\n"
    body = f"export const {export_name}: {type_name} = {to_ts_literal(tree)};\n"
    return header + body

# -----------------------------------------------------------------------------
# TYPE DECLARATIONS
# -----------------------------------------------------------------------------

def render_type_shape(value: Any, indent: int = 0) -> str:
    """
    Render the structural type of a tree value.

    Arrays become `string[]`, mappings become nested object types, and every
    other leaf becomes `string`.
    """
    if isinstance(value, list):
        return "string[]"
    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = INDENT * (indent + 1)
        inner = "\n".join(
            f"{pad}{format_key(k)}: {render_type_shape(v, indent + 1)};" for k, v in value.items()
        )
        return "{\n" + inner + "\n" + INDENT * indent + "}"
    return "string"


def extract_language_block(types_source: str) -> str:
    """
    Pull the independently maintained `Language` type out of a types file.

    Falls back to the default English/Spanish union when absent.
    """
    match = _LANGUAGE_BLOCK_RX.search(types_source or "")
    return match.group(0) if match else DEFAULT_LANGUAGE_BLOCK


def render_types_module(
        tree: TranslationTree,
        existing_source: str = "",
        type_name: str = DEFAULT_TYPE_NAME,
) -> str:
    """Render the types file: preserved Language block, then the interface."""
    language_block = extract_language_block(existing_source)
    return f"{language_block}export interface {type_name} {render_type_shape(tree)}\n"
