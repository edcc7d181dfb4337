from __future__ import annotations

"""
Locale Source Reader.

Extracts the exported translation object from a TypeScript/JavaScript locale
module without evaluating it. The object literal is read by a small
recursive-descent parser that accepts only literal data: objects, arrays,
strings, numbers, booleans, null and undefined. Anything executable (spread,
identifiers used as values, function calls, template interpolation) is
rejected with a LocaleParseError that points at the offending position.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from localesweep.domain.errors import LocaleParseError, LocaleReadError
from localesweep.domain.models import LocaleModule
from localesweep.infra.fs import read_text

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

# export const NAME [: TYPE] = {   (type annotation may not contain '=')
_EXPORT_RX = re.compile(
    r"export\s+const\s+([A-Za-z_$][\w$]*)\s*(?::\s*[^=]+?)?\s*=\s*(?=\{)"
)

_NUMBER_RX = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F_]+|0[oO][0-7_]+|0[bB][01_]+"
    r"|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?)"
)

_WORD_RX = re.compile(r"[A-Za-z_$][\w$]*")

_SIMPLE_ESCAPES: Dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_KEYWORD_VALUES: Dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_locale_source(source: str) -> LocaleModule:
    """
    Parse the first exported object constant of a locale module.

    Args:
        source: Full text of the locale file.

    Returns:
        LocaleModule: Export name and parsed tree.

    Raises:
        LocaleParseError: No `export const X = {...}` found, or the literal
                          contains unsupported syntax or nests too deeply.
    """
    match = _EXPORT_RX.search(source)
    if not match:
        raise LocaleParseError("Could not find exported object in locale file")

    parser = _LiteralParser(source, match.end())
    try:
        tree = parser.parse_object()
    except RecursionError:
        raise LocaleParseError("Locale literal nested too deeply") from None

    return LocaleModule(export_name=match.group(1), tree=tree)


def read_locale_module(path: str, *, strict: bool = True) -> LocaleModule:
    """
    Read and parse a locale file.

    A file that cannot be read is always fatal. A file that cannot be parsed
    is fatal in strict mode; otherwise it degrades to an empty tree so a
    report can still be produced.

    Args:
        path: Absolute path of the locale module.
        strict: Whether parse failures propagate.

    Raises:
        LocaleReadError: The file is missing or not valid UTF-8.
        LocaleParseError: The content is not a supported literal (strict only).
    """
    try:
        source = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise LocaleReadError(f"Cannot read locale file '{path}': {e}") from e

    try:
        module = parse_locale_source(source)
    except LocaleParseError as e:
        if strict:
            raise LocaleParseError(f"{path}: {e}") from e
        logger.warning(f"Locale file '{path}' could not be parsed ({e}). Treating it as empty.")
        return LocaleModule(export_name="", tree={})

    logger.debug(f"Parsed locale '{module.export_name}' from {path}")
    return module

# -----------------------------------------------------------------------------
# LITERAL PARSER
# -----------------------------------------------------------------------------

class _LiteralParser:
    """Character-level recursive-descent parser over a JS literal subset."""

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos
        self.length = len(text)

    # -- Diagnostics ----------------------------------------------------------

    def _location(self, pos: Optional[int] = None) -> Tuple[int, int]:
        p = self.pos if pos is None else pos
        line = self.text.count("\n", 0, p) + 1
        col = p - (self.text.rfind("\n", 0, p) + 1) + 1
        return line, col

    def _error(self, message: str, pos: Optional[int] = None) -> LocaleParseError:
        line, col = self._location(pos)
        return LocaleParseError(message, line, col)

    # -- Scanning -------------------------------------------------------------

    def skip_trivia(self) -> None:
        """Skip whitespace, line comments and block comments."""
        text = self.text
        while self.pos < self.length:
            ch = text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                end = text.find("\n", self.pos)
                self.pos = self.length if end == -1 else end + 1
            elif text.startswith("/*", self.pos):
                end = text.find("*/", self.pos + 2)
                if end == -1:
                    raise self._error("Unterminated block comment")
                self.pos = end + 2
            else:
                return

    def _peek(self) -> str:
        self.skip_trivia()
        if self.pos >= self.length:
            raise self._error("Unexpected end of input")
        return self.text[self.pos]

    def _expect(self, ch: str) -> None:
        if self._peek() != ch:
            raise self._error(f"Expected '{ch}' but found '{self.text[self.pos]}'")
        self.pos += 1

    # -- Grammar --------------------------------------------------------------

    def parse_value(self) -> Any:
        ch = self._peek()
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self._parse_array()
        if ch in "'\"`":
            return self._parse_string()
        if self.text.startswith("...", self.pos):
            raise self._error("Spread syntax is not supported in locale literals")
        if ch.isdigit() or ch in "+-.":
            return self._parse_number()

        word = _WORD_RX.match(self.text, self.pos)
        if word and word.group(0) in _KEYWORD_VALUES:
            self.pos = word.end()
            return _KEYWORD_VALUES[word.group(0)]
        if word:
            raise self._error(f"Unsupported expression '{word.group(0)}'")
        raise self._error(f"Unexpected character '{ch}'")

    def parse_object(self) -> Dict[str, Any]:
        self._expect("{")
        out: Dict[str, Any] = {}
        while True:
            if self._peek() == "}":
                self.pos += 1
                return out

            key = self._parse_key()
            self._expect(":")
            out[key] = self.parse_value()

            ch = self._peek()
            if ch == ",":
                self.pos += 1
            elif ch != "}":
                raise self._error(f"Expected ',' or '}}' but found '{ch}'")

    def _parse_array(self) -> List[Any]:
        self._expect("[")
        out: List[Any] = []
        while True:
            if self._peek() == "]":
                self.pos += 1
                return out

            out.append(self.parse_value())

            ch = self._peek()
            if ch == ",":
                self.pos += 1
            elif ch != "]":
                raise self._error(f"Expected ',' or ']' but found '{ch}'")

    def _parse_key(self) -> str:
        ch = self._peek()
        if ch in "'\"":
            return self._parse_string()
        if ch == "[":
            raise self._error("Computed property keys are not supported")
        if self.text.startswith("...", self.pos):
            raise self._error("Spread syntax is not supported in locale literals")
        if ch.isdigit():
            number = _NUMBER_RX.match(self.text, self.pos)
            if number:
                self.pos = number.end()
                return number.group(0)

        word = _WORD_RX.match(self.text, self.pos)
        if not word:
            raise self._error(f"Invalid property key starting with '{ch}'")
        self.pos = word.end()
        return word.group(0)

    def _parse_number(self) -> Any:
        start = self.pos
        match = _NUMBER_RX.match(self.text, self.pos)
        if not match or match.end() == start:
            raise self._error("Invalid numeric literal")
        self.pos = match.end()

        raw = match.group(0).replace("_", "")
        sign = -1 if raw.startswith("-") else 1
        body = raw.lstrip("+-")
        prefix = body[:2].lower()
        try:
            if prefix in ("0x", "0o", "0b"):
                base = {"0x": 16, "0o": 8, "0b": 2}[prefix]
                return sign * int(body[2:], base)
            if any(c in body for c in ".eE"):
                return sign * float(body)
            return sign * int(body)
        except ValueError:
            raise self._error("Invalid numeric literal", start) from None

    def _parse_string(self) -> str:
        quote = self.text[self.pos]
        start = self.pos
        self.pos += 1
        chunks: List[str] = []
        text = self.text

        while True:
            if self.pos >= self.length:
                raise self._error("Unterminated string literal", start)
            ch = text[self.pos]

            if ch == quote:
                self.pos += 1
                break
            if ch == "\\":
                chunks.append(self._parse_escape())
                continue
            if quote == "`" and text.startswith("${", self.pos):
                raise self._error("Template interpolation is not supported in locale literals")
            if ch in "\r\n" and quote != "`":
                raise self._error("Unterminated string literal", start)

            chunks.append(ch)
            self.pos += 1

        value = "".join(chunks)
        # Join escaped UTF-16 surrogate pairs into real code points
        return value.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")

    def _parse_escape(self) -> str:
        text = self.text
        self.pos += 1
        if self.pos >= self.length:
            raise self._error("Unterminated escape sequence")
        ch = text[self.pos]
        self.pos += 1

        if ch in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[ch]
        if ch == "0" and not (self.pos < self.length and text[self.pos].isdigit()):
            return "\0"
        if ch == "x":
            return self._read_hex(2)
        if ch == "u":
            if self.pos < self.length and text[self.pos] == "{":
                end = text.find("}", self.pos)
                if end == -1:
                    raise self._error("Invalid unicode escape")
                digits = text[self.pos + 1:end]
                self.pos = end + 1
                return self._hex_to_char(digits)
            return self._read_hex(4)
        if ch == "\r":
            # Line continuation, CRLF form
            if self.pos < self.length and text[self.pos] == "\n":
                self.pos += 1
            return ""
        if ch in "\n\u2028\u2029":
            return ""
        return ch

    def _read_hex(self, count: int) -> str:
        digits = self.text[self.pos:self.pos + count]
        if len(digits) != count:
            raise self._error("Invalid hexadecimal escape")
        self.pos += count
        return self._hex_to_char(digits)

    def _hex_to_char(self, digits: str) -> str:
        try:
            return chr(int(digits, 16))
        except ValueError:
            raise self._error(f"Invalid hexadecimal escape '{digits}'") from None
