"""Tests for rules/constructor_patterns.py (R03)."""

from gearcheck.application.rules.constructor_patterns import ConstructorPatternsRule
from gearcheck.domain.model.configuration import ValidationConfig
from gearcheck.domain.model.diagnostic import Diagnostic
from gearcheck.domain.model.enums import Severity
from tests.factories import StubResolver, make_package

TYPES = """package user

type Service interface {
\tRun() error
}

type service struct{}

func (s *service) Run() error { return nil }
"""


def check(code: str, rel_path: str = "pkg/user/wire.go") -> tuple[Diagnostic, ...]:
    package_name = rel_path.split("/")[-2]
    types = TYPES.replace("package user", f"package {package_name}")
    code = code.replace("package user", f"package {package_name}")
    package = make_package((rel_path.rsplit("/", 1)[0] + "/types.go", types), (rel_path, code))
    return ConstructorPatternsRule().check(package, StubResolver(), ValidationConfig())


class TestConstructorPatterns:
    """Tests for ConstructorPatternsRule."""

    def test_concrete_pointer_is_warning(self) -> None:
        """New* returning *localStruct is a warning at the func keyword."""
        (diagnostic,) = check("package user\n\nfunc NewService() *service {\n\treturn &service{}\n}\n")

        assert diagnostic.rule_id == "R03"
        assert diagnostic.severity is Severity.WARNING
        assert (diagnostic.line, diagnostic.column) == (3, 1)
        assert "NewService" in diagnostic.message
        assert "should return an interface" in diagnostic.message

    def test_interface_return_is_fine(self) -> None:
        """Returning the interface is the expected style."""
        assert check("package user\n\nfunc NewService() Service {\n\treturn &service{}\n}\n") == ()

    def test_only_first_result_counts(self) -> None:
        """(Service, *service) passes, (*service, error) does not."""
        assert check("package user\n\nfunc NewA() (Service, *service) { return nil, nil }\n") == ()
        assert len(check("package user\n\nfunc NewB() (*service, error) { return nil, nil }\n")) == 1

    def test_pointer_to_interface_left_to_usage_rule(self) -> None:
        """*Interface results are R02 findings, not R03."""
        assert check("package user\n\nfunc NewService() *Service { return nil }\n") == ()

    def test_qualified_and_unknown_types(self) -> None:
        """Types not declared in the package are not judged."""
        assert check('package user\n\nimport "bytes"\n\nfunc NewBuf() *bytes.Buffer { return nil }\n') == ()
        assert check("package user\n\nfunc NewThing() *Thing { return nil }\n") == ()

    def test_not_constructors(self) -> None:
        """Methods, unexported functions and other names are skipped."""
        code = (
            "package user\n\n"
            "func (s *service) NewChild() *service { return s }\n"
            "func newService() *service { return nil }\n"
            "func Build() *service { return nil }\n"
        )

        assert check(code) == ()

    def test_exempt_path_category(self) -> None:
        """Utility and configuration packages may return concrete types."""
        assert check("package utils\n\nfunc NewService() *service { return nil }\n", "pkg/utils/wire.go") == ()
