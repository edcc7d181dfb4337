from __future__ import annotations

"""
Unit tests for Destructuring Alias Resolution.
"""

from localesweep.core.analysis.aliases import DestructuringAliasResolver


def test_plain_and_renamed_bindings():
    """TC-01: Plain and renamed bindings both map to their section."""
    text = "const { invitation, common: c } = t;"

    assert DestructuringAliasResolver().resolve(text) == {
        "invitation": "invitation",
        "c": "common",
    }


def test_unknown_sections_are_ignored():
    """TC-02: Bindings of unknown sections are ignored."""
    text = "const { invitation, settings: s, foo } = t;"

    assert DestructuringAliasResolver().resolve(text) == {"invitation": "invitation"}


def test_only_bare_t_right_hand_side_counts():
    """TC-03: Destructuring from anything other than `t` is not an alias source."""
    text = "const { invitation } = useLanguage();\nconst { common } = props;"

    assert DestructuringAliasResolver().resolve(text) == {}


def test_identifiers_ending_in_t_are_accepted():
    """TC-04: No word boundary precedes `t`, so `= foot` still reads as `= t`."""
    text = "const { guests } = foot;"

    assert DestructuringAliasResolver().resolve(text) == {"guests": "guests"}


def test_later_binding_overwrites_earlier():
    """TC-05: The last binding of a local name wins across the file."""
    text = (
        "const { common: x } = t;\n"
        "function Other() {\n"
        "  const { invitation: x } = t;\n"
        "}\n"
    )

    assert DestructuringAliasResolver().resolve(text) == {"x": "invitation"}


def test_multiline_destructuring_and_empty_parts():
    """TC-06: Multi-line lists with a trailing comma are read."""
    text = "const {\n  common,\n  date: d,\n} = t"

    assert DestructuringAliasResolver().resolve(text) == {"common": "common", "d": "date"}


def test_custom_sections():
    """TC-07: The recognized sections can be configured."""
    text = "const { settings: s, common } = t;"

    assert DestructuringAliasResolver(["settings"]).resolve(text) == {"s": "settings"}
