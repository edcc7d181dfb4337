from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the fixed inputs of the analyzer: default project layout,
targeted source extensions, the closed enumeration of top-level translation
sections used for alias resolution, and the code-generation templates used
when locale and type files are rewritten.
"""

from typing import Final, List, Tuple

# -----------------------------------------------------------------------------
# PROJECT LAYOUT (relative to the working directory)
# -----------------------------------------------------------------------------

CONFIG_FILE_NAME: Final[str] = ".localesweep.json"

DEFAULT_SRC_DIR: Final[str] = "src"
DEFAULT_PRIMARY_LOCALE: Final[str] = "src/locales/en.ts"
DEFAULT_SECONDARY_LOCALE: Final[str] = "src/locales/es.ts"
DEFAULT_TYPES_FILE: Final[str] = "src/types/i18n.ts"

DEFAULT_EXTENSIONS: Final[List[str]] = [".ts", ".tsx", ".js", ".jsx"]

# -----------------------------------------------------------------------------
# TRANSLATION NAMESPACE
# -----------------------------------------------------------------------------

# Must be kept in sync by hand with the first-level keys of the primary locale.
TOP_LEVEL_SECTIONS: Final[Tuple[str, ...]] = (
    "common",
    "nav",
    "auth",
    "wedding",
    "guests",
    "rsvp",
    "weddingParty",
    "invitation",
    "customization",
    "date",
    "validation",
    "errors",
    "success",
    "language",
)

# -----------------------------------------------------------------------------
# CODE GENERATION
# -----------------------------------------------------------------------------

DEFAULT_TYPE_NAME: Final[str] = "TranslationKeys"
DEFAULT_TYPE_IMPORT: Final[str] = "../types/i18n"
DEFAULT_PRIMARY_EXPORT: Final[str] = "englishTranslations"
DEFAULT_SECONDARY_EXPORT: Final[str] = "spanishTranslations"

DEFAULT_LANGUAGE_BLOCK: Final[str] = "export type Language = 'en' | 'es';\n\n"
INDENT: Final[str] = "  "
