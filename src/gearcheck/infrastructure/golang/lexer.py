"""Go lexer (tokenizer).

Converts Go source text into a stream of tokens, applying Go's automatic
semicolon insertion. Comments are dropped.

Handles: identifiers, keywords, numbers, interpreted/raw strings, runes,
operators, line and general comments.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from gearcheck.domain.exceptions import ParseError


class TokenType(Enum):
    """Types of tokens in Go source."""

    IDENT = auto()  # foo, _, Ünïcode
    KEYWORD = auto()  # func, type, struct
    NUMBER = auto()  # 42, 0x1F, 1e-9, 3i
    STRING = auto()  # "interpreted", `raw`
    CHAR = auto()  # 'a', '\n'
    OPERATOR = auto()  # + * ( ) { } ... :=
    SEMICOLON = auto()  # explicit ; or inserted at newline
    EOF = auto()


KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

# Longest first
OPERATORS: tuple[str, ...] = (
    "<<=",
    ">>=",
    "&^=",
    "...",
    "&&",
    "||",
    "<-",
    "++",
    "--",
    "==",
    "!=",
    "<=",
    ">=",
    ":=",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "<<",
    ">>",
    "&^",
    "+",
    "-",
    "*",
    "/",
    "%",
    "&",
    "|",
    "^",
    "<",
    ">",
    "=",
    "!",
    "~",
    "(",
    ")",
    "[",
    "]",
    "{",
    "}",
    ",",
    ".",
    ":",
)

_SEMICOLON_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})
_SEMICOLON_OPERATORS = frozenset({"++", "--", ")", "]", "}"})
_LITERALS = frozenset({TokenType.IDENT, TokenType.NUMBER, TokenType.STRING, TokenType.CHAR})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the lexer.

    Attributes:
        type: Token type
        value: Source text (literals keep their quotes)
        line: 1-based line
        column: 1-based column
        implicit: True for semicolons inserted at a newline or EOF
    """

    type: TokenType
    value: str
    line: int
    column: int
    implicit: bool = False

    def is_op(self, *values: str) -> bool:
        """True if this is one of the given operators."""
        return self.type is TokenType.OPERATOR and self.value in values

    def is_keyword(self, *values: str) -> bool:
        """True if this is one of the given keywords."""
        return self.type is TokenType.KEYWORD and self.value in values

    def ends_statement(self) -> bool:
        """Go rule: a newline after this token inserts a semicolon."""
        if self.type in _LITERALS:
            return True
        if self.type is TokenType.KEYWORD:
            return self.value in _SEMICOLON_KEYWORDS
        return self.type is TokenType.OPERATOR and self.value in _SEMICOLON_OPERATORS


class GoLexer:
    """Tokenizer for Go source files.

    Usage:
        tokens = GoLexer(source, path="pkg/foo/foo.go").tokenize()
    """

    def __init__(self, source: str, path: str = "<source>") -> None:
        self._source = source
        self._path = path
        self._pos = 0
        self._line = 1
        self._column = 1
        self._length = len(source)
        self._last: Token | None = None

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Tokens ending with EOF

        Raises:
            ParseError: Illegal character, unterminated literal or comment
        """
        return list(self._iter_tokens())

    def _error(self, reason: str, line: int | None = None, column: int | None = None) -> ParseError:
        return ParseError(
            path=self._path,
            reason=reason,
            line=line if line is not None else self._line,
            column=column if column is not None else self._column,
        )

    def _current(self) -> str:
        """Current character, '' at end."""
        return self._source[self._pos] if self._pos < self._length else ""

    def _peek(self, offset: int = 1) -> str:
        pos = self._pos + offset
        return self._source[pos] if pos < self._length else ""

    def _advance(self, count: int = 1) -> None:
        for _ in range(count):
            if self._pos >= self._length:
                return
            if self._source[self._pos] == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
            self._pos += 1

    def _auto_semicolon(self) -> Token | None:
        """Semicolon to insert at a line break, if the last token asks for one."""
        if self._last is not None and self._last.ends_statement():
            return Token(TokenType.SEMICOLON, ";", self._line, self._column, implicit=True)
        return None

    def _emit(self, token: Token) -> Token:
        self._last = token
        return token

    def _iter_tokens(self) -> Iterator[Token]:
        while True:
            ch = self._current()

            if ch == "":
                semi = self._auto_semicolon()
                if semi is not None:
                    yield self._emit(semi)
                yield Token(TokenType.EOF, "", self._line, self._column)
                return

            if ch == "\n":
                semi = self._auto_semicolon()
                self._advance()
                if semi is not None:
                    yield self._emit(semi)
                continue

            if ch in " \t\r\ufeff":
                self._advance()
                continue

            if ch == "/" and self._peek() == "/":
                while self._current() not in ("", "\n"):
                    self._advance()
                continue

            if ch == "/" and self._peek() == "*":
                line, column = self._line, self._column
                if self._skip_general_comment() and self._last is not None and self._last.ends_statement():
                    yield self._emit(Token(TokenType.SEMICOLON, ";", line, column, implicit=True))
                continue

            yield self._emit(self._read_token())

    def _skip_general_comment(self) -> bool:
        """Skip /* ... */. Returns True if it spans a newline."""
        line, column = self._line, self._column
        end = self._source.find("*/", self._pos + 2)
        if end == -1:
            raise self._error("comment not terminated", line, column)
        has_newline = "\n" in self._source[self._pos : end]
        self._advance(end + 2 - self._pos)
        return has_newline

    def _read_token(self) -> Token:
        ch = self._current()
        line, column = self._line, self._column

        if ch == "_" or ch.isalpha():
            start = self._pos
            while self._current() and (self._current() == "_" or self._current().isalnum()):
                self._advance()
            word = self._source[start : self._pos]
            kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENT
            return Token(kind, word, line, column)

        if ch.isdigit() or (ch == "." and self._peek().isdigit()):
            return Token(TokenType.NUMBER, self._read_number(), line, column)

        if ch == '"':
            return Token(TokenType.STRING, self._read_quoted('"', "string"), line, column)

        if ch == "`":
            end = self._source.find("`", self._pos + 1)
            if end == -1:
                raise self._error("raw string literal not terminated", line, column)
            text = self._source[self._pos : end + 1]
            self._advance(len(text))
            return Token(TokenType.STRING, text, line, column)

        if ch == "'":
            return Token(TokenType.CHAR, self._read_quoted("'", "rune"), line, column)

        if ch == ";":
            self._advance()
            return Token(TokenType.SEMICOLON, ";", line, column)

        for op in OPERATORS:
            if self._source.startswith(op, self._pos):
                self._advance(len(op))
                return Token(TokenType.OPERATOR, op, line, column)

        raise self._error(f"invalid character {ch!r}", line, column)

    def _read_number(self) -> str:
        start = self._pos
        is_hex = self._current() == "0" and self._peek() in ("x", "X")
        exponent = ("p", "P") if is_hex else ("e", "E", "p", "P")
        while True:
            ch = self._current()
            if ch and (ch.isalnum() or ch in "_."):
                self._advance()
                if ch in exponent and self._current() in ("+", "-"):
                    self._advance()
                continue
            break
        return self._source[start : self._pos]

    def _read_quoted(self, quote: str, what: str) -> str:
        """Read an interpreted string or rune literal, escapes kept as written."""
        line, column = self._line, self._column
        start = self._pos
        self._advance()
        while True:
            ch = self._current()
            if ch in ("", "\n"):
                raise self._error(f"{what} literal not terminated", line, column)
            if ch == "\\":
                self._advance(2)
                continue
            self._advance()
            if ch == quote:
                return self._source[start : self._pos]
