"""Declaration model: what gearcheck extracts from a Go source file.

Closed set of immutable variants. Rule checkers consume them through
gearcheck.domain.visitor, never through ad hoc isinstance checks.

Examples:
    type UserService interface { ... }   → TypeDecl("UserService", INTERFACE)
    type userService struct { repo *R }  → TypeDecl("userService", STRUCT, fields=(Field("repo", *R),))
    func NewUser(db *gorm.DB) *user      → FuncDecl("NewUser", params=(...), results=(...))
    var x = (*Repo)(nil)                 → PointerExpr(*Repo, context="var x")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from gearcheck.domain.model.enums import DeclKind
from gearcheck.domain.model.location import Position


def is_exported(name: str) -> bool:
    """Go export rule: identifier starts with an upper case letter."""
    return bool(name) and name[0].isupper()


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Type expression as written in source.

    Only references to named types carry a name. Composite types
    (slices, maps, channels, function types, anonymous structs) have
    name=None and keep every pointer-to-named type found inside them
    in `nested`.

    Examples:
        Repo          → TypeRef("Repo", name="Repo")
        *model.User   → TypeRef("*model.User", name="User", qualifier="model", pointer=True)
        []*Repo       → TypeRef("[]*Repo", name=None, nested=(TypeRef("*Repo", ...),))

    Attributes:
        text: Source spelling (normalized spacing)
        position: Position of the `*` for pointers, of the first token otherwise
        name: Type name for (pointers to) named types
        qualifier: Import alias for `alias.Name`
        pointer: True for `*T`
        nested: Pointers to named types inside a composite type
    """

    text: str
    position: Position
    name: str | None = None
    qualifier: str | None = None
    pointer: bool = False
    nested: tuple[TypeRef, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")
        if self.qualifier is not None and self.name is None:
            raise ValueError("qualifier requires a type name")

    @property
    def is_named_pointer(self) -> bool:
        """True for `*T` and `*alias.T`."""
        return self.pointer and self.name is not None

    @property
    def is_qualified(self) -> bool:
        """True when the name is reached through an import alias."""
        return self.qualifier is not None

    @property
    def corrected(self) -> str:
        """Spelling without the leading pointer."""
        return self.text[1:] if self.pointer else self.text

    def pointers(self) -> tuple[TypeRef, ...]:
        """This reference (if a named pointer) followed by nested pointers."""
        own = (self,) if self.is_named_pointer else ()
        return own + self.nested


@dataclass(frozen=True, slots=True)
class Field:
    """Struct field. Embedded fields are named after their type."""

    name: str
    type: TypeRef
    position: Position
    embedded: bool = False


@dataclass(frozen=True, slots=True)
class Param:
    """Function parameter or result. Unnamed ones have name=None."""

    name: str | None
    type: TypeRef
    position: Position
    is_result: bool = False

    @property
    def display_name(self) -> str:
        """Name for messages: the parameter name, else its type name."""
        return self.name or self.type.name or self.type.text


@dataclass(frozen=True, slots=True)
class Receiver:
    """Method receiver, with the base type name (type arguments dropped)."""

    type_name: str
    pointer: bool
    position: Position


@dataclass(frozen=True, slots=True)
class InterfaceMethod:
    """Method element of an interface type."""

    name: str
    params: tuple[Param, ...]
    results: tuple[Param, ...]
    position: Position


@dataclass(frozen=True, slots=True)
class TypeDecl:
    """Top-level type declaration.

    Attributes:
        name: Declared name
        kind: INTERFACE, STRUCT or OTHER
        position: Position of the declared name
        fields: Struct fields (STRUCT only)
        methods: Method elements (INTERFACE only)
        embeds: Embedded interfaces and union terms (INTERFACE only)
        underlying: Underlying type for OTHER kinds
        is_alias: True for `type A = B`
        has_methods: Same file declares a method with this receiver type
    """

    name: str
    kind: DeclKind
    position: Position
    fields: tuple[Field, ...] = ()
    methods: tuple[InterfaceMethod, ...] = ()
    embeds: tuple[TypeRef, ...] = ()
    underlying: TypeRef | None = None
    is_alias: bool = False
    has_methods: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.fields and self.kind is not DeclKind.STRUCT:
            raise ValueError(f"only structs have fields, got {self.kind.name}")
        if (self.methods or self.embeds) and self.kind is not DeclKind.INTERFACE:
            raise ValueError(f"only interfaces have method elements, got {self.kind.name}")

    @property
    def exported(self) -> bool:
        """True when visible outside its package."""
        return is_exported(self.name)

    @property
    def is_interface(self) -> bool:
        """True for interface types."""
        return self.kind is DeclKind.INTERFACE

    @property
    def is_struct(self) -> bool:
        """True for struct types."""
        return self.kind is DeclKind.STRUCT


@dataclass(frozen=True, slots=True)
class FuncDecl:
    """Top-level function or method declaration.

    Position is the position of the `func` keyword.
    """

    name: str
    position: Position
    params: tuple[Param, ...] = ()
    results: tuple[Param, ...] = ()
    receiver: Receiver | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if any(p.is_result for p in self.params):
            raise ValueError("params must not contain results")
        if not all(r.is_result for r in self.results):
            raise ValueError("results must be marked is_result")

    @property
    def exported(self) -> bool:
        """True when visible outside its package."""
        return is_exported(self.name)

    @property
    def is_method(self) -> bool:
        """True when declared with a receiver."""
        return self.receiver is not None


@dataclass(frozen=True, slots=True)
class PointerExpr:
    """Pointer to a named type outside fields, params and results.

    Found in var/const declarations, type declarations over pointers,
    interface embeds and function bodies.

    Attributes:
        type: The `*T` / `*alias.T` reference
        context: Enclosing declaration for messages (e.g. "func NewUser")
    """

    type: TypeRef
    context: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type.is_named_pointer:
            raise ValueError(f"PointerExpr requires a pointer to a named type, got {self.type.text!r}")

    @property
    def position(self) -> Position:
        """Position of the `*`."""
        return self.type.position


@dataclass(frozen=True, slots=True)
class Import:
    """Import spec.

    Examples:
        import "a/b/c"        → Import("a/b/c", None)     name "c"
        import m "a/b/model"  → Import("a/b/model", "m")  name "m"
        import _ "a/b"        → Import("a/b", "_")        name None
    """

    path: str
    alias: str | None = None
    position: Position | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")

    @property
    def name(self) -> str | None:
        """Qualifier that refers to this import, None for blank/dot imports."""
        if self.alias in ("_", "."):
            return None
        if self.alias:
            return self.alias
        return self.path.rstrip("/").rsplit("/", 1)[-1]


Declaration: TypeAlias = TypeDecl | InterfaceMethod | FuncDecl | Field | Param | PointerExpr
