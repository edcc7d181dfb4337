from __future__ import annotations

"""
Unit tests for the Locale Source Reader.

Verifies:
1. Extraction of the exported object (with and without type annotation).
2. The supported literal grammar (quotes, escapes, comments, arrays, scalars).
3. Rejection of executable or malformed syntax with a LocaleParseError.
4. Strict vs. lenient file loading.
"""

from pathlib import Path
from typing import Any, Dict

import pytest

from localesweep.core.locale.parser import parse_locale_source, read_locale_module
from localesweep.domain.errors import LocaleParseError, LocaleReadError


def _tree(literal: str) -> Dict[str, Any]:
    """Parse a bare object literal through a minimal exporting module."""
    return parse_locale_source(f"export const messages = {literal};").tree


def test_parse_annotated_export():
    """TC-01: Export name is captured and the type annotation is skipped."""
    source = (
        "import type { TranslationKeys } from '../types/i18n';\n\n"
        "export const englishTranslations: TranslationKeys = {\n"
        "  common: { save: 'Save' },\n"
        "};\n"
    )
    module = parse_locale_source(source)

    assert module.export_name == "englishTranslations"
    assert module.tree == {"common": {"save": "Save"}}


def test_parse_unannotated_export_skips_non_object_constants():
    """TC-02: The first exported *object* constant is the one parsed."""
    source = "export const VERSION = 3;\nexport const es = { a: 'b' } as const;\n"
    module = parse_locale_source(source)

    assert module.export_name == "es"
    assert module.tree == {"a": "b"}


def test_parse_preserves_key_order():
    """TC-03: Keys keep their source order at every level."""
    tree = _tree("{ z: '1', a: '2', m: { y: '3', b: '4' } }")

    assert list(tree) == ["z", "a", "m"]
    assert list(tree["m"]) == ["y", "b"]


def test_parse_quotes_comments_and_trailing_commas():
    """TC-04: All quote styles, both comment forms and trailing commas."""
    text = """{
      // line comment
      'quoted-key': "double",
      /* block
         comment */
      plain: `template`,
      list: ['a', "b",],
    }"""
    tree = _tree(text)

    assert tree == {"quoted-key": "double", "plain": "template", "list": ["a", "b"]}


def test_parse_string_escapes():
    """TC-05: Simple, hex and unicode escapes are decoded."""
    text = r"""{ a: 'It\'s', b: "say \"hi\"", c: 'line\nbreak', d: 'é\x41', e: '\u{1F600}', f: 'back\\slash' }"""
    tree = _tree(text)

    assert tree["a"] == "It's"
    assert tree["b"] == 'say "hi"'
    assert tree["c"] == "line\nbreak"
    assert tree["d"] == "éA"
    assert tree["e"] == "\U0001F600"
    assert tree["f"] == "back\\slash"


def test_parse_surrogate_pair_escape_is_joined():
    """TC-06: A \\u surrogate pair decodes to one astral character."""
    tree = _tree(r"{ smile: '\uD83D\uDE00' }")

    assert tree["smile"] == "\U0001F600"


def test_parse_scalars():
    """TC-07: Numbers and keyword literals become native scalars."""
    tree = _tree("{ n: 42, f: -1.5, h: 0xFF, s: 1_000, t: true, x: false, z: null, u: undefined }")

    assert tree == {
        "n": 42, "f": -1.5, "h": 255, "s": 1000,
        "t": True, "x": False, "z": None, "u": None,
    }


@pytest.mark.parametrize(
    "literal, fragment",
    [
        ("{ ...base, a: 'x' }", "Spread"),
        ("{ a: someVariable }", "someVariable"),
        ("{ a: `hello ${name}` }", "interpolation"),
        ("{ [key]: 'x' }", "Computed"),
        ("{ a: 'x' + 'y' }", "Expected ','"),
        ("{ a: 'unterminated }", "Unterminated"),
        ("{ a: 'x'", "end of input"),
    ],
)
def test_parse_rejects_non_literal_syntax(literal, fragment):
    """TC-08: Executable or incomplete syntax raises a LocaleParseError."""
    with pytest.raises(LocaleParseError) as exc_info:
        _tree(literal)

    assert fragment in str(exc_info.value)


@pytest.mark.parametrize("number", ["0x_", "0o_", "0b__", "-0x_"])
def test_parse_rejects_prefixed_number_without_digits(number):
    """TC-09: A radix prefix followed only by separators is not a number."""
    with pytest.raises(LocaleParseError, match="Invalid numeric literal"):
        _tree(f"{{ a: {{ b: {number} }} }}")


def test_parse_rejects_excessive_nesting():
    """TC-10: Nesting past the recursion limit is a parse error."""
    depth = 3000
    literal = "{a:" * depth + "'x'" + "}" * depth

    with pytest.raises(LocaleParseError, match="nested too deeply"):
        _tree(literal)


def test_parse_error_reports_location():
    """TC-11: Errors carry the 1-based line and column of the bad token."""
    with pytest.raises(LocaleParseError) as exc_info:
        _tree("{\n  a: 'ok',\n  b: oops,\n}")

    assert exc_info.value.line == 3
    assert exc_info.value.col == 6


def test_missing_export_raises():
    """TC-12: A module without an exported object constant is rejected."""
    with pytest.raises(LocaleParseError):
        parse_locale_source("const notExported = { a: 'b' };")


def test_read_locale_module_lenient_degrades_to_empty(tmp_path: Path):
    """TC-13: Lenient mode (report tool) turns a malformed literal into an empty tree."""
    path = tmp_path / "en.ts"
    path.write_text("export const en = { a: broken };", encoding="utf-8")

    module = read_locale_module(str(path), strict=False)

    assert module.tree == {}


@pytest.mark.parametrize(
    "source",
    [
        "export const en = { a: { b: 0x_ } };",
        "export const en = " + "{a:" * 3000 + "'x'" + "}" * 3000 + ";",
    ],
    ids=["bad-number", "deep-nesting"],
)
def test_read_locale_module_lenient_covers_every_parse_failure(tmp_path: Path, source):
    """TC-14: Malformed numbers and deep nesting also degrade to an empty tree."""
    path = tmp_path / "en.ts"
    path.write_text(source, encoding="utf-8")

    assert read_locale_module(str(path), strict=False).tree == {}
    with pytest.raises(LocaleParseError):
        read_locale_module(str(path), strict=True)


def test_read_locale_module_strict_raises(tmp_path: Path):
    """TC-15: Strict mode (prune tool) refuses to continue without a valid tree."""
    path = tmp_path / "en.ts"
    path.write_text("export default {};", encoding="utf-8")

    with pytest.raises(LocaleParseError):
        read_locale_module(str(path), strict=True)


def test_read_locale_module_missing_file_is_always_fatal(tmp_path: Path):
    """TC-16: An unreadable file is fatal in both modes."""
    missing = str(tmp_path / "nope.ts")

    with pytest.raises(LocaleReadError):
        read_locale_module(missing, strict=False)
    with pytest.raises(LocaleReadError):
        read_locale_module(missing, strict=True)
