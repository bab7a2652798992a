"""
Builtin Go source formatter — canonical layout without a Go toolchain.

Covers the subset of gofmt layout that generated swagger doc files use:

- one tab of indentation per open ``{``, ``(`` or ``[``
- runs of spaces outside literals and comments collapsed to one
- trailing whitespace stripped, blank line runs collapsed to one
- no blank lines just inside a block, one after the package clause
- values of consecutive ``"key": value`` lines aligned

Lexical errors (unbalanced brackets, unterminated literals) and lines
that are not one of the shapes a swagger doc file is made of raise
``FormatError`` with the offending line number. Only a line feed ends
a line, so separators such as U+2028 inside literals are plain text.
The result is idempotent: formatting formatted output is a no-op.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from swaggerdocs.adapters.base import SourceFormatter
from swaggerdocs.core.errors import FormatError

logger = logging.getLogger(__name__)

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())

_WS = " \t\r"

_IDENT = r"[^\W\d]\w*"
_STRING = r'"(?:[^"\\]|\\.)*"'
_COMMENT = r"(?: //.*)?"

_PACKAGE_RE = re.compile(rf"package {_IDENT}{_COMMENT}")
_MAP_DECL_RE = re.compile(rf"var {_IDENT} = map\[string\]string ?\{{{_COMMENT}")
_METHOD_DECL_RE = re.compile(
    rf"func \({_IDENT}\) SwaggerDoc\(\) map\[string\]string \{{{_COMMENT}"
)
_MAP_ENTRY_RE = re.compile(rf"{_STRING} ?: ?{_STRING},{_COMMENT}")
_RETURN_RE = re.compile(rf"return {_IDENT}{_COMMENT}")
_CLOSE_RE = re.compile(rf"\}}{_COMMENT}")
_KEY_VALUE_RE = re.compile(rf"({_STRING}) ?: ?(\S.*)")


@dataclass
class _Line:
    text: str
    indent: int = 0
    lineno: int = 0
    verbatim: bool = False  # started inside a raw string or block comment

    @property
    def blank(self) -> bool:
        return not self.verbatim and self.text == ""

    @property
    def is_comment(self) -> bool:
        return self.text.startswith("//") or self.text.startswith("/*")

    @property
    def opens_block(self) -> bool:
        return not self.verbatim and self.text[-1:] in _OPENERS

    @property
    def closes_block(self) -> bool:
        return not self.verbatim and self.text[:1] in _CLOSERS


class _Scanner:
    """Line-oriented Go lexer tracking bracket depth and multi-line literals."""

    def __init__(self) -> None:
        self.stack: list[tuple[str, int]] = []
        self.in_raw = False
        self.in_block = False

    def scan(self, raw_line: str, lineno: int) -> _Line:
        verbatim = self.in_raw or self.in_block
        depth = len(self.stack)
        out: list[str] = []
        line = raw_line if verbatim else raw_line.strip(_WS)
        i, n = 0, len(line)

        while i < n:
            if self.in_raw:
                end = line.find("`", i)
                stop = n if end < 0 else end + 1
                out.append(line[i:stop])
                self.in_raw = end < 0
                i = stop
                continue
            if self.in_block:
                end = line.find("*/", i)
                stop = n if end < 0 else end + 2
                out.append(line[i:stop])
                self.in_block = end < 0
                i = stop
                continue

            c = line[i]
            if c == "`":
                self.in_raw = True
                out.append(c)
                i += 1
            elif line.startswith("//", i):
                out.append(line[i:])
                break
            elif line.startswith("/*", i):
                self.in_block = True
                out.append("/*")
                i += 2
            elif c in "\"'":
                j = i + 1
                while j < n and line[j] != c:
                    j += 2 if line[j] == "\\" else 1
                if j >= n:
                    kind = "string" if c == '"' else "rune"
                    raise FormatError(f"unterminated {kind} literal", line=lineno)
                out.append(line[i : j + 1])
                i = j + 1
            elif c in " \t":
                while i < n and line[i] in " \t":
                    i += 1
                if out:
                    out.append(" ")
            elif c in _OPENERS:
                self.stack.append((c, lineno))
                out.append(c)
                i += 1
            elif c in _CLOSERS:
                if not self.stack or _OPENERS[self.stack[-1][0]] != c:
                    raise FormatError(f"unexpected {c!r}", line=lineno)
                self.stack.pop()
                out.append(c)
                i += 1
            else:
                out.append(c)
                i += 1

        text = "".join(out)
        if not self.in_raw:
            text = text.rstrip(_WS)

        if verbatim:
            return _Line(text=text, lineno=lineno, verbatim=True)

        closers = len(text) - len(text.lstrip(")]}"))
        return _Line(text=text, indent=max(depth - closers, 0), lineno=lineno)

    def finish(self, lineno: int) -> None:
        if self.in_raw:
            raise FormatError("unterminated raw string literal", line=lineno)
        if self.in_block:
            raise FormatError("unterminated block comment", line=lineno)
        if self.stack:
            opener, opened_at = self.stack[-1]
            raise FormatError(f"unclosed {opener!r}", line=opened_at)


def _tidy_blank_lines(lines: list[_Line]) -> list[_Line]:
    tidy: list[_Line] = []
    for line in lines:
        if line.blank:
            if not tidy or tidy[-1].blank or tidy[-1].opens_block:
                continue
        elif line.closes_block and tidy and tidy[-1].blank:
            tidy.pop()
        tidy.append(line)
    while tidy and tidy[-1].blank:
        tidy.pop()
    return tidy


def _code_lines(lines: list[_Line]):
    for idx, line in enumerate(lines):
        if not (line.blank or line.verbatim or line.is_comment):
            yield idx, line


def _check_structure(lines: list[_Line]) -> None:
    """Accept only a package clause followed by doc maps and SwaggerDoc methods."""
    state = None
    for _, line in _code_lines(lines):
        text = line.text
        if state is None:
            if not _PACKAGE_RE.fullmatch(text):
                raise FormatError(f"expected 'package' clause, found {text!r}", line=line.lineno)
            state = "top"
        elif state == "top":
            if _MAP_DECL_RE.fullmatch(text):
                state = "map"
            elif _METHOD_DECL_RE.fullmatch(text):
                state = "method"
            else:
                raise FormatError(
                    f"expected map or SwaggerDoc declaration, found {text!r}", line=line.lineno
                )
        elif _CLOSE_RE.fullmatch(text):
            state = "top"
        elif state == "map" and not _MAP_ENTRY_RE.fullmatch(text):
            raise FormatError(f"expected map entry, found {text!r}", line=line.lineno)
        elif state == "method" and not _RETURN_RE.fullmatch(text):
            raise FormatError(f"expected return statement, found {text!r}", line=line.lineno)

    if state is None:
        raise FormatError("expected 'package' clause, found end of file")


def _package_index(lines: list[_Line]) -> int:
    return next(idx for idx, _ in _code_lines(lines))


def _align_key_values(lines: list[_Line]) -> None:
    run: list[tuple[_Line, str, str]] = []

    def flush() -> None:
        if len(run) > 1:
            width = max(len(key) for _, key, _ in run)
            for line, key, value in run:
                line.text = f"{key}:{' ' * (width - len(key) + 1)}{value}"
        elif run:
            line, key, value = run[0]
            line.text = f"{key}: {value}"
        run.clear()

    for line in lines:
        match = None if line.verbatim else _KEY_VALUE_RE.fullmatch(line.text)
        if match is None or match.group(2)[-1:] in _OPENERS:
            flush()
            continue
        if run and run[0][0].indent != line.indent:
            flush()
        run.append((line, match.group(1), match.group(2)))
    flush()


class GoSourceFormatter(SourceFormatter):
    """Pure-Python canonical formatter for generated Go sources."""

    @property
    def name(self) -> str:
        return "builtin"

    def format(self, source: str) -> str:
        scanner = _Scanner()
        raw_lines = source.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()
        lines = [scanner.scan(raw, lineno) for lineno, raw in enumerate(raw_lines, 1)]
        scanner.finish(len(raw_lines))

        lines = _tidy_blank_lines(lines)
        _check_structure(lines)
        pkg_idx = _package_index(lines)
        if pkg_idx + 1 < len(lines) and not lines[pkg_idx + 1].blank:
            lines.insert(pkg_idx + 1, _Line(text=""))

        _align_key_values(lines)

        out = []
        for line in lines:
            if line.verbatim or line.blank:
                out.append(line.text)
            else:
                out.append("\t" * line.indent + line.text)

        logger.debug("Formatted %d line(s) into %d", len(raw_lines), len(out))
        return "\n".join(out) + "\n"
