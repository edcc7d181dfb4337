from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. A sample project tree (locales, types file, components) shared by the
   service, engine and CLI tests.
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Project
# -----------------------------------------------------------------------------
EN_SOURCE = """import type { TranslationKeys } from '../types/i18n';

export const englishTranslations: TranslationKeys = {
  common: {
    save: 'Save',
    cancel: 'Cancel',
    unusedCommon: 'Never shown',
  },
  invitation: {
    rsvpTitle: 'Will you attend?',
    greeting: "We're getting married!",
    oldBanner: 'Legacy banner',
  },
  guests: {
    list: {
      title: 'Guest list',
      empty: 'No guests yet',
    },
  },
  date: {
    months: ['January', 'February'],
  },
};
"""

ES_SOURCE = """import type { TranslationKeys } from '../types/i18n';

export const spanishTranslations: TranslationKeys = {
  common: {
    save: 'Guardar',
    unusedCommon: 'Nunca',
    onlySpanish: 'Sobra',
  },
  invitation: {
    rsvpTitle: '¿Vendrás?',
    greeting: '¡Nos casamos!',
  },
  guests: {
    list: {
      title: 'Lista de invitados',
    },
  },
  date: {
    months: ['Enero', 'Febrero'],
  },
};
"""

TYPES_SOURCE = """export type Language = 'en' | 'es';

export interface TranslationKeys {
  common: {
    save: string;
  };
}
"""

COMPONENT_SOURCES: Dict[str, str] = {
    "components/SaveButton.tsx": (
        "export function SaveButton({ t }) {\n"
        "  return <button title={t.common.cancel}>{t.common.save}</button>;\n"
        "}\n"
    ),
    "components/rsvp/RsvpCard.tsx": (
        "export function RsvpCard() {\n"
        "  const { t } = useLanguage();\n"
        "  const { invitation: inv } = t;\n"
        "  return <h1>{inv.rsvpTitle} {inv['greeting']}</h1>;\n"
        "}\n"
    ),
    "pages/Guests.jsx": "const title = t['guests'].list.title;\nconst months = t.date['months'];\n",
    "styles/theme.css": ".t { content: 't.common.unusedCommon'; }\n",
}


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small application tree.

    Structure:
    /project
      /src
        /locales   en.ts, es.ts
        /types     i18n.ts
        /components, /pages, /styles
    """
    root = tmp_path / "project"
    src = root / "src"
    (src / "locales").mkdir(parents=True)
    (src / "types").mkdir()

    (src / "locales" / "en.ts").write_text(EN_SOURCE, encoding="utf-8")
    (src / "locales" / "es.ts").write_text(ES_SOURCE, encoding="utf-8")
    (src / "types" / "i18n.ts").write_text(TYPES_SOURCE, encoding="utf-8")

    for rel_path, content in COMPONENT_SOURCES.items():
        target = src / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    return root


@pytest.fixture
def project_config(sample_project: Path) -> Dict[str, str]:
    """Engine configuration pointing at the sample project."""
    return {"root_dir": str(sample_project)}
