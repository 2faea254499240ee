"""Tests for domain/model/configuration.py."""

import pytest

from gearcheck.domain.model.configuration import Classification, ValidationConfig
from gearcheck.domain.model.enums import Severity


class TestClassification:
    """Tests for Classification."""

    @pytest.mark.parametrize("name", ["CreateUserRequest", "UserDTO", "OrderEvent", "GetOrders", "AppError"])
    def test_data_names(self, name: str) -> None:
        """Data suffixes and prefixes mark data carriers."""
        assert Classification().is_data_name(name) is True

    @pytest.mark.parametrize("name", ["UserService", "Handler", "Processor"])
    def test_business_names(self, name: str) -> None:
        """Other names are business logic."""
        assert Classification().is_data_name(name) is False

    def test_empty_dirs_rejected(self) -> None:
        """Required directories must be named."""
        with pytest.raises(ValueError, match="config_dir"):
            Classification(config_dir="/")

    def test_empty_entries_rejected(self) -> None:
        """Lists must hold non-empty strings."""
        with pytest.raises(ValueError, match="data_suffixes"):
            Classification(data_suffixes=("Model", ""))


class TestValidationConfig:
    """Tests for ValidationConfig."""

    def test_defaults(self) -> None:
        """No exclusions and no overrides by default."""
        config = ValidationConfig()

        assert config.exclude == ()
        assert config.severity_for("R01", Severity.WARNING) is Severity.WARNING

    def test_override(self) -> None:
        """Configured severity wins over the default."""
        config = ValidationConfig(rules={"R01": Severity.ERROR})

        assert config.severity_for("R01", Severity.WARNING) is Severity.ERROR

    def test_invalid_rule_id(self) -> None:
        """Rule ids look like R01."""
        with pytest.raises(ValueError, match="rule id must look like R01"):
            ValidationConfig(rules={"rule1": Severity.ERROR})

    def test_severity_type(self) -> None:
        """Overrides must be Severity members."""
        with pytest.raises(TypeError, match="must be Severity"):
            ValidationConfig(rules={"R01": "error"})  # type: ignore[dict-item]

    def test_with_exclusions_is_additive(self) -> None:
        """Extra patterns are appended, duplicates dropped."""
        config = ValidationConfig(exclude=("vendor", "docs"))

        merged = config.with_exclusions(["docs", " scripts ", ""])

        assert merged.exclude == ("vendor", "docs", "scripts")
        assert config.exclude == ("vendor", "docs")

    def test_with_exclusions_override(self) -> None:
        """override replaces the configured list."""
        config = ValidationConfig(exclude=("vendor",))

        assert config.with_exclusions(["docs"], override=True).exclude == ("docs",)
