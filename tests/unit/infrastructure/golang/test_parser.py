"""Tests for golang/parser.py."""

from pathlib import Path

import pytest

from gearcheck.domain.exceptions import ParseError
from gearcheck.domain.model.declarations import Import
from gearcheck.domain.model.enums import DeclKind
from gearcheck.infrastructure.golang.parser import GoSourceParser
from tests.factories import make_source


class TestPackageAndImports:
    """Tests for the package clause and import declarations."""

    def test_package_name(self) -> None:
        """Declared package name is recorded."""
        source_file = make_source("package user\n")

        assert source_file.package == "user"
        assert source_file.rel_path == "pkg/user/service.go"

    def test_grouped_imports(self) -> None:
        """Grouped imports keep aliases, blank and dot imports."""
        source_file = make_source(
            """package user

import (
\t"fmt"
\tm "example.com/shop/pkg/model"
\t_ "embed"
\t. "strings"
)
"""
        )

        assert source_file.imports == (
            Import("fmt"),
            Import("example.com/shop/pkg/model", "m"),
            Import("embed", "_"),
            Import("strings", "."),
        )
        assert dict(source_file.import_map()) == {"fmt": "fmt", "m": "example.com/shop/pkg/model"}

    def test_single_import(self) -> None:
        """Ungrouped import."""
        source_file = make_source('package user\nimport "net/http"\n')

        assert source_file.import_map()["http"] == "net/http"

    def test_missing_package_clause(self) -> None:
        """Files must start with a package clause."""
        with pytest.raises(ParseError, match="expected 'package'"):
            make_source("func f() {}\n")

    def test_import_after_declaration(self) -> None:
        """Imports after other declarations are rejected."""
        with pytest.raises(ParseError, match="imports must appear before"):
            make_source('package a\nvar x = 1\nimport "fmt"\n')


class TestTypeDeclarations:
    """Tests for type specs."""

    def test_interface_methods_and_embeds(self) -> None:
        """Interface methods keep their signatures, embeds are recorded."""
        source_file = make_source(
            """package user

type Service interface {
\tCreate(ctx context.Context, req *Request) (*User, error)
\tio.Closer
}
"""
        )

        (decl,) = source_file.types
        assert decl.kind is DeclKind.INTERFACE
        assert decl.exported is True
        (method,) = decl.methods
        assert method.name == "Create"
        assert [p.name for p in method.params] == ["ctx", "req"]
        assert [r.type.text for r in method.results] == ["*User", "error"]
        assert [e.text for e in decl.embeds] == ["io.Closer"]

    def test_struct_fields(self) -> None:
        """Named, grouped, embedded and tagged fields."""
        source_file = make_source(
            """package user

type service struct {
\trepo, backup Repo
\t*Base
\tlog.Logger
\tcache map[string]*User `json:"-"`
\tbuf [16]byte
}
"""
        )

        (decl,) = source_file.types
        assert decl.kind is DeclKind.STRUCT
        assert [f.name for f in decl.fields] == ["repo", "backup", "Base", "Logger", "cache", "buf"]
        assert [f.embedded for f in decl.fields] == [False, False, True, True, False, False]
        assert decl.fields[2].type.is_named_pointer is True
        assert decl.fields[3].type.qualifier == "log"
        cache = decl.fields[4].type
        assert cache.text == "map[string]*User"
        assert cache.name is None
        assert [p.text for p in cache.pointers()] == ["*User"]

    def test_has_methods(self) -> None:
        """Structs used as receivers in the same file have methods."""
        source_file = make_source(
            """package user

type Svc struct{}
type Data struct{}

func (s *Svc) Run() {}
"""
        )

        assert {t.name: t.has_methods for t in source_file.types} == {"Svc": True, "Data": False}

    def test_generic_type_parameters_are_skipped(self) -> None:
        """type List[T any] is a struct named List."""
        source_file = make_source("package a\n\ntype List[T any] struct {\n\titems []T\n}\n")

        (decl,) = source_file.types
        assert decl.name == "List"
        assert decl.kind is DeclKind.STRUCT

    def test_array_type_is_not_generic(self) -> None:
        """type Buf [N]byte is an array type."""
        source_file = make_source("package a\n\ntype Buf [N]byte\n")

        (decl,) = source_file.types
        assert decl.kind is DeclKind.OTHER
        assert decl.underlying is not None
        assert decl.underlying.text == "[N]byte"

    def test_alias_of_pointer_is_a_pointer_expression(self) -> None:
        """Pointers in underlying types are recorded with their declaration."""
        source_file = make_source("package a\n\ntype (\n\tID string\n\tRepoPtr = *Repo\n)\n")

        assert [t.name for t in source_file.types] == ["ID", "RepoPtr"]
        assert source_file.types[1].is_alias is True
        (expr,) = source_file.pointer_exprs
        assert expr.type.text == "*Repo"
        assert expr.context == "type RepoPtr"

    def test_type_set_interface(self) -> None:
        """Union elements with ~ are parsed as embeds."""
        source_file = make_source("package a\n\ntype Number interface {\n\t~int | ~float64\n}\n")

        assert [e.text for e in source_file.types[0].embeds] == ["int", "float64"]


class TestFunctionDeclarations:
    """Tests for function and method declarations."""

    def test_constructor_signature(self) -> None:
        """Parameters, variadic parameter and pointer result."""
        source_file = make_source(
            """package user

func NewService(repo Repo, opts ...Option) *service {
\treturn &service{repo: repo}
}
"""
        )

        (decl,) = source_file.functions
        assert decl.name == "NewService"
        assert (decl.position.line, decl.position.column) == (3, 1)
        assert decl.receiver is None
        assert [(p.name, p.type.text) for p in decl.params] == [("repo", "Repo"), ("opts", "...Option")]
        assert decl.results[0].type.is_named_pointer is True
        assert decl.results[0].type.name == "service"

    def test_method_with_named_results(self) -> None:
        """Receiver and named results."""
        source_file = make_source(
            "package user\n\nfunc (s *service) Get(id string) (u *User, err error) {\n\treturn nil, nil\n}\n"
        )

        (decl,) = source_file.functions
        assert decl.receiver is not None
        assert decl.receiver.type_name == "service"
        assert decl.receiver.pointer is True
        assert [r.name for r in decl.results] == ["u", "err"]
        assert all(r.is_result for r in decl.results)

    def test_generic_receiver(self) -> None:
        """Receiver type arguments are dropped from the type name."""
        source_file = make_source("package a\n\nfunc (l *List[T]) Len() int { return 0 }\n")

        assert source_file.functions[0].receiver.type_name == "List"

    def test_grouped_and_unnamed_parameters(self) -> None:
        """(a, b int) shares the type; (int, string) are types."""
        source_file = make_source("package a\n\nfunc f(a, b int) {}\nfunc g(int, string) error { return nil }\n")

        f, g = source_file.functions
        assert [(p.name, p.type.text) for p in f.params] == [("a", "int"), ("b", "int")]
        assert [(p.name, p.type.text) for p in g.params] == [(None, "int"), (None, "string")]

    def test_missing_parameter_type(self) -> None:
        """Named parameters must all have a type."""
        with pytest.raises(ParseError, match="missing parameter type"):
            make_source("package a\n\nfunc f(a int, b) {}\n")

    def test_unterminated_body(self) -> None:
        """Body without closing brace."""
        with pytest.raises(ParseError):
            make_source("package a\n\nfunc f() {\n\tx := 1\n")


class TestPointerExpressions:
    """Tests for pointer expressions found in bodies and initializers."""

    def test_body_pointer_expressions(self) -> None:
        """Unary pointers are recorded, multiplication is not."""
        source_file = make_source(
            """package a

func run() {
\tvar svc *Service
\tx := a * b
\ty := (*Repo)(nil)
\tf := func(r *Store) {}
\t_ = []*model.User{}
}
"""
        )

        exprs = source_file.pointer_exprs
        assert [e.type.text for e in exprs] == ["*Service", "*Repo", "*Store", "*model.User"]
        assert {e.context for e in exprs} == {"func run"}
        assert exprs[3].type.qualifier == "model"

    def test_method_context(self) -> None:
        """Method bodies are named after receiver and method."""
        source_file = make_source("package a\n\nfunc (s *svc) Do() {\n\t_ = (*Repo)(nil)\n}\n")

        assert source_file.pointer_exprs[0].context == "func (svc) Do"

    def test_var_declaration(self) -> None:
        """Declared type and initializer of package-level vars."""
        source_file = make_source("package a\n\nvar current *Repo = nil\n\nconst size = 4 * 1024\n")

        (expr,) = source_file.pointer_exprs
        assert expr.type.text == "*Repo"
        assert expr.context == "var current"


class TestGoSourceParser:
    """Tests for GoSourceParser file access."""

    def test_parse_file_relative_path(self, tmp_path: Path) -> None:
        """rel_path is POSIX and relative to root."""
        target = tmp_path / "pkg" / "a" / "a.go"
        target.parent.mkdir(parents=True)
        target.write_text("package a\n")

        source_file = GoSourceParser().parse_file(target, tmp_path)

        assert source_file.rel_path == "pkg/a/a.go"
        assert source_file.path == target

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise ParseError."""
        with pytest.raises(ParseError, match="file not found"):
            GoSourceParser().parse_file(tmp_path / "nope.go", tmp_path)

    def test_encoding_error(self, tmp_path: Path) -> None:
        """Undecodable bytes raise ParseError."""
        target = tmp_path / "bad.go"
        target.write_bytes(b"package a\n\xff\xfe\n")

        with pytest.raises(ParseError, match="encoding error"):
            GoSourceParser().parse_file(target, tmp_path)
