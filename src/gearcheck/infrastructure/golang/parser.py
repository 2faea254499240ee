"""Go declaration parser.

Recursive descent over the token stream of GoLexer. Extracts the
declaration model (imports, types, functions, bare pointer expressions)
without type checking. Function bodies and initializer expressions are
scanned, not parsed: only unary `*Name` / `*alias.Name` occurrences are
recorded.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from gearcheck.domain.exceptions import ParseError
from gearcheck.domain.model.declarations import (
    Field,
    FuncDecl,
    Import,
    InterfaceMethod,
    Param,
    PointerExpr,
    Receiver,
    TypeDecl,
    TypeRef,
)
from gearcheck.domain.model.enums import DeclKind
from gearcheck.domain.model.location import Position
from gearcheck.domain.model.source_file import SourceFile
from gearcheck.domain.ports.source_parser import SourceParserPort
from gearcheck.infrastructure.golang.lexer import GoLexer, Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Iterable

_WORDISH = frozenset(
    {TokenType.IDENT, TokenType.KEYWORD, TokenType.NUMBER, TokenType.STRING, TokenType.CHAR}
)
_OPERANDS = frozenset({TokenType.IDENT, TokenType.NUMBER, TokenType.STRING, TokenType.CHAR})

_ParamEntry: TypeAlias = tuple[Token | None, TypeRef | None]


class GoParser:
    """Parser for one tokenized Go file.

    Usage:
        tokens = GoLexer(source, path=rel_path).tokenize()
        source_file = GoParser(tokens, path=rel_path).parse(abs_path)
    """

    def __init__(self, tokens: list[Token], *, path: str) -> None:
        if not tokens or tokens[-1].type is not TokenType.EOF:
            raise ValueError("tokens must end with EOF")
        self._tokens = tokens
        self._path = path
        self._i = 0
        self._pointer_exprs: list[PointerExpr] = []

    # Token helpers

    @property
    def _tok(self) -> Token:
        return self._tokens[self._i]

    def _peek(self, offset: int = 1) -> Token:
        return self._tokens[min(self._i + offset, len(self._tokens) - 1)]

    def _next(self) -> Token:
        tok = self._tokens[self._i]
        if tok.type is not TokenType.EOF:
            self._i += 1
        return tok

    def _error(self, reason: str, tok: Token | None = None) -> ParseError:
        at = tok if tok is not None else self._tok
        return ParseError(path=self._path, reason=reason, line=at.line, column=at.column)

    def _unexpected(self, expected: str) -> ParseError:
        tok = self._tok
        found = "end of file" if tok.type is TokenType.EOF else repr(tok.value)
        if tok.type is TokenType.SEMICOLON and tok.implicit:
            found = "newline"
        return self._error(f"expected {expected}, found {found}")

    def _accept_op(self, value: str) -> bool:
        if self._tok.is_op(value):
            self._next()
            return True
        return False

    def _expect_op(self, value: str) -> Token:
        if not self._tok.is_op(value):
            raise self._unexpected(repr(value))
        return self._next()

    def _expect_keyword(self, value: str) -> Token:
        if not self._tok.is_keyword(value):
            raise self._unexpected(repr(value))
        return self._next()

    def _expect_ident(self) -> Token:
        if self._tok.type is not TokenType.IDENT:
            raise self._unexpected("identifier")
        return self._next()

    def _expect_semicolon(self, closing: str | None = None) -> None:
        """Statement terminator; may be omitted before closing or at EOF."""
        tok = self._tok
        if tok.type is TokenType.SEMICOLON:
            self._next()
        elif tok.type is TokenType.EOF or (closing is not None and tok.is_op(closing)):
            return
        else:
            raise self._unexpected("';' or newline")

    def _matching(self, offset: int) -> int:
        """Offset of the bracket closing the opener at offset."""
        depth = 0
        index = self._i + offset
        while index < len(self._tokens):
            tok = self._tokens[index]
            if tok.is_op("(", "[", "{"):
                depth += 1
            elif tok.is_op(")", "]", "}"):
                depth -= 1
                if depth == 0:
                    return index - self._i
            elif tok.type is TokenType.EOF:
                break
            index += 1
        raise self._error("unbalanced brackets", self._peek(offset))

    def _skip_balanced(self) -> None:
        """Skip from the current opener past its matching closer."""
        self._i += self._matching(0) + 1

    def _position(self, tok: Token) -> Position:
        return Position(tok.line, tok.column)

    def _text(self, start: int) -> str:
        """Normalized spelling of tokens[start:current]."""
        parts: list[str] = []
        prev: Token | None = None
        for tok in self._tokens[start : self._i]:
            if tok.type is TokenType.SEMICOLON:
                parts.append("; ")
                prev = tok
                continue
            if prev is not None and tok.type in _WORDISH and (prev.type in _WORDISH or prev.is_op(")")):
                parts.append(" ")
            parts.append(tok.value)
            if tok.is_op(","):
                parts.append(" ")
            prev = tok
        return "".join(parts).replace("; }", "}").strip()

    @staticmethod
    def _starts_type(tok: Token) -> bool:
        if tok.type is TokenType.IDENT:
            return True
        return tok.is_op("*", "[", "(", "<-") or tok.is_keyword("map", "chan", "func", "struct", "interface")

    def _bracket_starts_named(self, offset: int) -> bool:
        """For `name [`: True if the bracket is an array/slice type of a named
        field or parameter rather than type arguments of a generic type."""
        close = self._matching(offset)
        return self._starts_type(self._peek(close + 1))

    # File

    def parse(self, path: Path | None = None) -> SourceFile:
        """Parse the whole file.

        Args:
            path: Absolute path recorded on the SourceFile (defaults to the
                relative path given at construction)

        Returns:
            Parsed SourceFile

        Raises:
            ParseError: Malformed source
        """
        while self._tok.type is TokenType.SEMICOLON:
            self._next()
        self._expect_keyword("package")
        package = self._expect_ident().value
        if package == "_":
            raise self._error("invalid package name _")
        self._expect_semicolon()

        imports: list[Import] = []
        while self._tok.is_keyword("import"):
            imports.extend(self._parse_import_decl())
            self._expect_semicolon()

        types: list[TypeDecl] = []
        functions: list[FuncDecl] = []
        while self._tok.type is not TokenType.EOF:
            tok = self._tok
            if tok.type is TokenType.SEMICOLON:
                self._next()
                continue
            if tok.is_keyword("type"):
                types.extend(self._parse_type_decl())
            elif tok.is_keyword("func"):
                functions.append(self._parse_func_decl())
            elif tok.is_keyword("var", "const"):
                self._parse_value_decl()
            elif tok.is_keyword("import"):
                raise self._error("imports must appear before other declarations")
            else:
                raise self._unexpected("declaration")
            self._expect_semicolon()

        receivers = {f.receiver.type_name for f in functions if f.receiver is not None}
        types = [dataclasses.replace(t, has_methods=True) if t.name in receivers else t for t in types]

        return SourceFile(
            path=path if path is not None else Path(self._path),
            rel_path=self._path,
            package=package,
            imports=tuple(imports),
            types=tuple(types),
            functions=tuple(functions),
            pointer_exprs=tuple(self._pointer_exprs),
        )

    # Imports

    def _parse_import_decl(self) -> list[Import]:
        self._next()
        if self._accept_op("("):
            specs: list[Import] = []
            while not self._tok.is_op(")"):
                specs.append(self._parse_import_spec())
                self._expect_semicolon(")")
            self._next()
            return specs
        return [self._parse_import_spec()]

    def _parse_import_spec(self) -> Import:
        first = self._tok
        alias: str | None = None
        if first.type is TokenType.IDENT:
            alias = self._next().value
        elif first.is_op("."):
            self._next()
            alias = "."
        literal = self._tok
        if literal.type is not TokenType.STRING:
            raise self._unexpected("import path")
        self._next()
        import_path = literal.value[1:-1]
        if not import_path:
            raise self._error("empty import path", literal)
        return Import(path=import_path, alias=alias, position=self._position(first))

    # Types

    def _parse_type_decl(self) -> list[TypeDecl]:
        self._next()
        if self._accept_op("("):
            decls: list[TypeDecl] = []
            while not self._tok.is_op(")"):
                decls.append(self._parse_type_spec())
                self._expect_semicolon(")")
            self._next()
            return decls
        return [self._parse_type_spec()]

    def _parse_type_spec(self) -> TypeDecl:
        name_tok = self._expect_ident()
        name = name_tok.value
        position = self._position(name_tok)
        # type List[T any] ... versus type Buf [N]byte
        if self._tok.is_op("[") and self._peek().type is TokenType.IDENT and not self._peek(2).is_op("]"):
            self._skip_balanced()
        is_alias = self._accept_op("=")
        context = f"type {name}"

        if self._tok.is_keyword("struct"):
            fields = self._parse_struct_type()
            return TypeDecl(name, DeclKind.STRUCT, position, fields=fields, is_alias=is_alias)

        if self._tok.is_keyword("interface"):
            methods, embeds = self._parse_interface_type()
            for embed in embeds:
                self._record_pointers(embed.pointers(), context)
            return TypeDecl(
                name,
                DeclKind.INTERFACE,
                position,
                methods=methods,
                embeds=embeds,
                is_alias=is_alias,
            )

        underlying = self._parse_type()
        self._record_pointers(underlying.pointers(), context)
        return TypeDecl(name, DeclKind.OTHER, position, underlying=underlying, is_alias=is_alias)

    def _parse_struct_type(self) -> tuple[Field, ...]:
        self._expect_keyword("struct")
        self._expect_op("{")
        fields: list[Field] = []
        while not self._tok.is_op("}"):
            fields.extend(self._parse_field_decl())
            self._expect_semicolon("}")
        self._next()
        return tuple(fields)

    def _is_embedded_field(self) -> bool:
        nxt = self._peek()
        if nxt.is_op(".", "}") or nxt.type in (TokenType.SEMICOLON, TokenType.STRING):
            return True
        if nxt.is_op("["):
            return not self._bracket_starts_named(1)
        return False

    def _parse_field_decl(self) -> list[Field]:
        first = self._tok
        if first.is_op("*") or (first.type is TokenType.IDENT and self._is_embedded_field()):
            type_ref = self._parse_type()
            self._skip_tag()
            if type_ref.name is None:
                raise self._error("embedded field must be a type name", first)
            return [Field(type_ref.name, type_ref, self._position(first), embedded=True)]

        names = [self._expect_ident()]
        while self._accept_op(","):
            names.append(self._expect_ident())
        type_ref = self._parse_type()
        self._skip_tag()
        return [Field(n.value, type_ref, self._position(n)) for n in names]

    def _skip_tag(self) -> None:
        if self._tok.type is TokenType.STRING:
            self._next()

    def _parse_interface_type(self) -> tuple[tuple[InterfaceMethod, ...], tuple[TypeRef, ...]]:
        self._expect_keyword("interface")
        self._expect_op("{")
        methods: list[InterfaceMethod] = []
        embeds: list[TypeRef] = []
        while not self._tok.is_op("}"):
            tok = self._tok
            if tok.type is TokenType.IDENT and self._peek().is_op("("):
                self._next()
                params = self._parse_parameters(is_result=False)
                results = self._parse_results()
                methods.append(InterfaceMethod(tok.value, params, results, self._position(tok)))
            else:
                # embedded interface or type set: ~int | ~string
                while True:
                    self._accept_op("~")
                    embeds.append(self._parse_type())
                    if not self._accept_op("|"):
                        break
            self._expect_semicolon("}")
        self._next()
        return tuple(methods), tuple(embeds)

    def _parse_type(self) -> TypeRef:
        """Parse a type expression starting at the current token."""
        start = self._i
        tok = self._tok
        position = self._position(tok)

        if tok.is_op("*"):
            self._next()
            inner = self._parse_type()
            text = self._text(start)
            if inner.name is not None and not inner.pointer:
                return TypeRef(
                    text,
                    position,
                    name=inner.name,
                    qualifier=inner.qualifier,
                    pointer=True,
                    nested=inner.nested,
                )
            return TypeRef(text, position, nested=inner.pointers())

        if tok.type is TokenType.IDENT:
            return self._parse_type_name()

        if tok.is_op("("):
            self._next()
            inner = self._parse_type()
            self._expect_op(")")
            return inner

        if tok.is_op("["):
            self._next()
            if not self._tok.is_op("]"):
                # array length
                self._i += self._matching(-1)
            self._expect_op("]")
            elem = self._parse_type()
            return TypeRef(self._text(start), position, nested=elem.pointers())

        if tok.is_keyword("map"):
            self._next()
            self._expect_op("[")
            key = self._parse_type()
            self._expect_op("]")
            value = self._parse_type()
            return TypeRef(self._text(start), position, nested=key.pointers() + value.pointers())

        if tok.is_keyword("chan") or tok.is_op("<-"):
            self._next()
            if tok.is_op("<-"):
                self._expect_keyword("chan")
            else:
                self._accept_op("<-")
            elem = self._parse_type()
            return TypeRef(self._text(start), position, nested=elem.pointers())

        if tok.is_keyword("func"):
            self._next()
            params = self._parse_parameters(is_result=False)
            results = self._parse_results()
            nested = _pointers_of(p.type for p in (*params, *results))
            return TypeRef(self._text(start), position, nested=nested)

        if tok.is_keyword("struct"):
            fields = self._parse_struct_type()
            return TypeRef(self._text(start), position, nested=_pointers_of(f.type for f in fields))

        if tok.is_keyword("interface"):
            methods, embeds = self._parse_interface_type()
            signature_types = (p.type for m in methods for p in (*m.params, *m.results))
            nested = _pointers_of(signature_types) + _pointers_of(embeds)
            return TypeRef(self._text(start), position, nested=nested)

        raise self._unexpected("type")

    def _parse_type_name(self) -> TypeRef:
        start = self._i
        first = self._expect_ident()
        name = first.value
        qualifier: str | None = None
        if self._tok.is_op("."):
            self._next()
            qualifier = name
            name = self._expect_ident().value

        nested: tuple[TypeRef, ...] = ()
        if self._tok.is_op("["):
            self._next()
            args = [self._parse_type()]
            while self._accept_op(","):
                if self._tok.is_op("]"):
                    break
                args.append(self._parse_type())
            self._expect_op("]")
            nested = _pointers_of(args)

        return TypeRef(self._text(start), self._position(first), name=name, qualifier=qualifier, nested=nested)

    # Signatures

    def _parse_parameters(self, *, is_result: bool) -> tuple[Param, ...]:
        self._expect_op("(")
        entries: list[_ParamEntry] = []
        while not self._tok.is_op(")"):
            entries.append(self._parse_parameter_entry())
            if not self._accept_op(","):
                break
        self._expect_op(")")
        return self._resolve_parameters(entries, is_result=is_result)

    def _parse_parameter_entry(self) -> _ParamEntry:
        tok = self._tok
        if tok.type is TokenType.IDENT:
            nxt = self._peek()
            if nxt.is_op(",", ")"):
                # name in a group (a, b int) or a type (int, error)
                self._next()
                return tok, None
            if nxt.is_op("."):
                return None, self._parse_type()
            if nxt.is_op("[") and not self._bracket_starts_named(1):
                return None, self._parse_type()
            self._next()
            return tok, self._parse_param_type()
        return None, self._parse_param_type()

    def _parse_param_type(self) -> TypeRef:
        if self._tok.is_op("..."):
            start = self._i
            position = self._position(self._next())
            elem = self._parse_type()
            return TypeRef(self._text(start), position, nested=elem.pointers())
        return self._parse_type()

    def _resolve_parameters(self, entries: list[_ParamEntry], *, is_result: bool) -> tuple[Param, ...]:
        """Apply Go's grouping: either every parameter is named or none is."""
        params: list[Param] = []
        if not any(name is not None and type_ref is not None for name, type_ref in entries):
            for name_tok, type_ref in entries:
                if type_ref is None and name_tok is not None:
                    type_ref = TypeRef(name_tok.value, self._position(name_tok), name=name_tok.value)
                if type_ref is not None:
                    params.append(Param(None, type_ref, type_ref.position, is_result=is_result))
            return tuple(params)

        pending: list[Token] = []
        for name_tok, type_ref in entries:
            if name_tok is None:
                raise self._error("mixed named and unnamed parameters")
            if type_ref is None:
                pending.append(name_tok)
                continue
            for tok in (*pending, name_tok):
                params.append(Param(tok.value, type_ref, self._position(tok), is_result=is_result))
            pending = []
        if pending:
            raise self._error("missing parameter type", pending[-1])
        return tuple(params)

    def _parse_results(self) -> tuple[Param, ...]:
        if self._tok.is_op("("):
            return self._parse_parameters(is_result=True)
        if self._starts_type(self._tok):
            type_ref = self._parse_type()
            return (Param(None, type_ref, type_ref.position, is_result=True),)
        return ()

    # Functions

    def _parse_func_decl(self) -> FuncDecl:
        func_tok = self._next()
        receiver: Receiver | None = None
        if self._tok.is_op("("):
            receiver = self._parse_receiver()
        name_tok = self._expect_ident()
        if self._tok.is_op("["):
            self._skip_balanced()
        params = self._parse_parameters(is_result=False)
        results = self._parse_results()

        if self._tok.is_op("{"):
            owner = f"({receiver.type_name}) " if receiver is not None else ""
            self._scan(f"func {owner}{name_tok.value}", body=True)

        return FuncDecl(
            name=name_tok.value,
            position=self._position(func_tok),
            params=params,
            results=results,
            receiver=receiver,
        )

    def _parse_receiver(self) -> Receiver:
        start = self._tok
        params = self._parse_parameters(is_result=False)
        if len(params) != 1:
            raise self._error("method must have exactly one receiver", start)
        type_ref = params[0].type
        if type_ref.name is None or type_ref.qualifier is not None:
            raise self._error(f"invalid receiver type {type_ref.text}", start)
        return Receiver(type_ref.name, type_ref.pointer, type_ref.position)

    # var / const

    def _parse_value_decl(self) -> None:
        keyword = self._next().value
        if self._accept_op("("):
            while not self._tok.is_op(")"):
                self._parse_value_spec(keyword)
                self._expect_semicolon(")")
            self._next()
            return
        self._parse_value_spec(keyword)

    def _parse_value_spec(self, keyword: str) -> None:
        names = [self._expect_ident()]
        while self._accept_op(","):
            names.append(self._expect_ident())
        context = f"{keyword} {names[0].value}"

        tok = self._tok
        ends_spec = tok.type in (TokenType.SEMICOLON, TokenType.EOF) or tok.is_op(")", "=")
        if not ends_spec:
            self._record_pointers(self._parse_type().pointers(), context)
        if self._accept_op("="):
            self._scan(context, body=False)

    # Bodies and expressions

    def _scan(self, context: str, *, body: bool) -> None:
        """Skip a function body (body=True) or an initializer expression,
        recording unary pointer expressions."""
        depth = 0
        prev: Token | None = None
        before_prev: Token | None = None
        if body:
            prev = self._expect_op("{")
            depth = 1
        open_brackets: list[bool] = []
        closed_type_bracket = False

        while True:
            tok = self._tok
            if tok.type is TokenType.EOF:
                if body or depth:
                    raise self._unexpected("'}'" if body else "')'")
                return
            if not body and depth == 0 and (tok.type is TokenType.SEMICOLON or tok.is_op(")")):
                return
            self._next()

            if tok.is_keyword("func") and self._tok.is_op("("):
                # function literal or func type: its signature holds types
                params = self._parse_parameters(is_result=False)
                results = self._parse_results()
                self._record_pointers(_pointers_of(p.type for p in (*params, *results)), context)
                before_prev, prev = None, self._tokens[self._i - 1]
                continue

            if tok.is_op("(", "{"):
                depth += 1
            elif tok.is_op(")", "}"):
                depth -= 1
                if body and depth == 0:
                    return
            elif tok.is_op("["):
                # []T, [...]T and map[K]V open a type, not an index
                is_type = (prev is not None and prev.is_keyword("map")) or self._tok.is_op("]", "...")
                open_brackets.append(is_type)
            elif tok.is_op("]"):
                closed_type_bracket = open_brackets.pop() if open_brackets else False
            elif tok.is_op("*") and (
                not _ends_operand(prev, closed_type_bracket)
                or (before_prev is not None and before_prev.is_keyword("var"))
            ):
                self._record_unary_pointer(tok, context)
            before_prev, prev = prev, tok

    def _record_unary_pointer(self, star: Token, context: str) -> None:
        operand = self._tok
        if operand.type is not TokenType.IDENT:
            return
        name, qualifier = operand.value, None
        if self._peek().is_op(".") and self._peek(2).type is TokenType.IDENT:
            qualifier, name = name, self._peek(2).value
        text = f"*{qualifier}.{name}" if qualifier else f"*{name}"
        ref = TypeRef(text, self._position(star), name=name, qualifier=qualifier, pointer=True)
        self._pointer_exprs.append(PointerExpr(ref, context))

    def _record_pointers(self, refs: Iterable[TypeRef], context: str) -> None:
        for ref in refs:
            self._pointer_exprs.append(PointerExpr(ref, context))


def _pointers_of(types: Iterable[TypeRef]) -> tuple[TypeRef, ...]:
    return tuple(p for t in types for p in t.pointers())


def _ends_operand(prev: Token | None, closed_type_bracket: bool) -> bool:
    """True if a `*` after prev is binary (multiplication)."""
    if prev is None:
        return False
    if prev.type in _OPERANDS:
        return True
    if prev.is_op(")", "}"):
        return True
    return prev.is_op("]") and not closed_type_bracket


class GoSourceParser(SourceParserPort):
    """SourceParserPort implementation for Go files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def parse_file(self, path: Path, root: Path) -> SourceFile:
        """Read and parse a Go file.

        Args:
            path: Path to .go file
            root: Validated root, used to compute the relative path

        Returns:
            Parsed SourceFile

        Raises:
            ParseError: If file cannot be read, decoded or parsed
        """
        rel_path = path.relative_to(root).as_posix() if path.is_relative_to(root) else path.as_posix()
        # Read file - FAIL-FIRST on file errors
        try:
            source = path.read_text(encoding=self._encoding)
        except FileNotFoundError as e:
            raise ParseError(path=rel_path, reason="file not found") from e
        except PermissionError as e:
            raise ParseError(path=rel_path, reason="permission denied") from e
        except UnicodeDecodeError as e:
            raise ParseError(path=rel_path, reason=f"encoding error: {e.reason}") from e
        except OSError as e:
            raise ParseError(path=rel_path, reason=f"cannot read file: {e.strerror or e}") from e
        return self.parse_source(source, rel_path, path=path)

    def parse_source(self, source: str, rel_path: str, *, path: Path | None = None) -> SourceFile:
        """Parse Go source text.

        Args:
            source: File contents
            rel_path: POSIX path relative to the root, used in errors
            path: Absolute path to record (defaults to rel_path)

        Returns:
            Parsed SourceFile

        Raises:
            ParseError: Malformed source
        """
        tokens = GoLexer(source, path=rel_path).tokenize()
        return GoParser(tokens, path=rel_path).parse(path)
