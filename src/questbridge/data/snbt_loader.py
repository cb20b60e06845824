"""Parser for the stringified NBT dialect written by FTB Quests.

FTB Quests separates compound entries and list elements with newlines as often
as with commas, so both are accepted as separators. Values come back as plain
Python trees: ``dict``, ``list``, ``str``, ``int``, ``float`` and ``bool``.
Numeric type suffixes (``1b``, ``5L``, ``0.5d``) only decide between ``int``
and ``float``; the NBT tag type itself is not kept.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List

from questbridge.core.types import TreeValue
from .errors import DataLoadError

_BARE_CHARS = re.compile(r"[A-Za-z0-9_\-.+]+")
_INT_TOKEN = re.compile(r"[-+]?\d+[bBsSlL]?")
_FLOAT_TOKEN = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?[fFdD]?")
_TYPED_ARRAY_PREFIX = re.compile(r"([BILbil])\s*;")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f"}
_UNICODE_DIGITS = re.compile(r"[0-9A-Fa-f]{4}")


class _SnbtParser:
    def __init__(self, text: str, source: str) -> None:
        self._text = text
        self._source = source
        self._pos = 0

    def parse_document(self) -> TreeValue:
        self._skip_whitespace()
        value = self._parse_value()
        self._skip_whitespace()
        if self._pos != len(self._text):
            raise self._error("unexpected trailing content")
        return value

    def _parse_value(self) -> TreeValue:
        char = self._peek()
        if char == "{":
            return self._parse_compound()
        if char == "[":
            return self._parse_list()
        if char in ("\"", "'"):
            return self._parse_quoted()
        return self._parse_bare_value()

    def _parse_compound(self) -> Dict[str, Any]:
        self._expect("{")
        result: Dict[str, Any] = {}
        self._skip_separators()
        while self._peek() != "}":
            key = self._parse_key()
            self._skip_whitespace()
            self._expect(":")
            self._skip_whitespace()
            result[key] = self._parse_value()
            self._skip_separators()
        self._expect("}")
        return result

    def _parse_list(self) -> List[Any]:
        self._expect("[")
        self._skip_whitespace()
        match = _TYPED_ARRAY_PREFIX.match(self._text, self._pos)
        if match:
            self._pos = match.end()
        items: List[Any] = []
        self._skip_separators()
        while self._peek() != "]":
            items.append(self._parse_value())
            self._skip_separators()
        self._expect("]")
        return items

    def _parse_key(self) -> str:
        if self._peek() in ("\"", "'"):
            return self._parse_quoted()
        match = _BARE_CHARS.match(self._text, self._pos)
        if not match:
            raise self._error("expected a compound key")
        self._pos = match.end()
        return match.group(0)

    def _parse_quoted(self) -> str:
        quote = self._peek()
        self._pos += 1
        chunks: List[str] = []
        while True:
            if self._pos >= len(self._text):
                raise self._error("unterminated string")
            char = self._text[self._pos]
            if char == quote:
                self._pos += 1
                return "".join(chunks)
            if char == "\\":
                if self._pos + 1 >= len(self._text):
                    raise self._error("unterminated escape sequence")
                escaped = self._text[self._pos + 1]
                if escaped == "u":
                    chunks.append(self._parse_unicode_escape())
                    continue
                chunks.append(_ESCAPES.get(escaped, escaped))
                self._pos += 2
                continue
            chunks.append(char)
            self._pos += 1

    def _parse_unicode_escape(self) -> str:
        digits = self._text[self._pos + 2 : self._pos + 6]
        if not _UNICODE_DIGITS.fullmatch(digits):
            raise self._error("invalid unicode escape")
        self._pos += 6
        return chr(int(digits, 16))

    def _parse_bare_value(self) -> TreeValue:
        match = _BARE_CHARS.match(self._text, self._pos)
        if not match:
            raise self._error(f"unexpected character {self._peek()!r}")
        self._pos = match.end()
        token = match.group(0)
        if token == "true":
            return True
        if token == "false":
            return False
        if _INT_TOKEN.fullmatch(token):
            return int(token.rstrip("bBsSlL"))
        if _FLOAT_TOKEN.fullmatch(token):
            return float(token.rstrip("fFdD"))
        return token

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _skip_separators(self) -> None:
        while self._pos < len(self._text) and (
            self._text[self._pos].isspace() or self._text[self._pos] == ","
        ):
            self._pos += 1

    def _peek(self) -> str:
        if self._pos >= len(self._text):
            raise self._error("unexpected end of input")
        return self._text[self._pos]

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise self._error(f"expected {char!r}")
        self._pos += 1

    def _error(self, message: str) -> DataLoadError:
        line = self._text.count("\n", 0, self._pos) + 1
        column = self._pos - (self._text.rfind("\n", 0, self._pos) + 1) + 1
        return DataLoadError(f"Invalid SNBT in {self._source} at line {line}, column {column}: {message}")


def parse_snbt(text: str, source: str = "<string>") -> TreeValue:
    """Parse SNBT text into a plain Python tree and raise DataLoadError on failure."""
    return _SnbtParser(text, source).parse_document()


def decode_buffer(data: bytes, source: str = "<buffer>") -> str:
    """Decode a raw quest file buffer as UTF-8 text."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"{source} is not valid UTF-8: {exc}") from exc


def read_buffer(path: Path) -> bytes:
    """Read a quest file from disk and raise DataLoadError on failure."""
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise DataLoadError(f"Quest file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read quest file: {path}") from exc


def load_snbt(path: Path) -> TreeValue:
    """Load and parse an SNBT file from disk."""
    return parse_snbt(decode_buffer(read_buffer(path), str(path)), str(path))
