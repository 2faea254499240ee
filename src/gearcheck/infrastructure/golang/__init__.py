"""Infrastructure layer: Go source support (lexer, declaration parser, go.mod)."""

from gearcheck.infrastructure.golang.gomod import parse_module_path, read_module_path
from gearcheck.infrastructure.golang.lexer import GoLexer, Token, TokenType
from gearcheck.infrastructure.golang.parser import GoParser, GoSourceParser

__all__ = [
    "GoLexer",
    "GoParser",
    "GoSourceParser",
    "Token",
    "TokenType",
    "parse_module_path",
    "read_module_path",
]
