from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from ghcpick.core.manifest import find_dependency, load_manifest, read_upper_bound
from ghcpick.exceptions import (
    ConstraintNotFoundError,
    DependencyNotFoundError,
    ManifestError,
)
from ghcpick.models import Constraint


@pytest.mark.unit
class TestLoadManifest:
    """Tests for load_manifest."""

    def test_loads_mapping(self, write_manifest: Callable[..., Path]) -> None:
        """Test a valid YAML mapping is returned as a dict."""
        path = write_manifest("name: demo\ndependencies:\n  - base\n")

        data = load_manifest(path)

        assert data["name"] == "demo"
        assert data["dependencies"] == ["base"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing manifest raises ManifestError."""
        with pytest.raises(ManifestError) as exc_info:
            load_manifest(tmp_path / "package.yaml")

        assert "Cannot read manifest" in exc_info.value.message

    def test_directory_instead_of_file(self, tmp_path: Path) -> None:
        """Test a directory path raises ManifestError."""
        with pytest.raises(ManifestError):
            load_manifest(tmp_path)

    def test_invalid_yaml(self, write_manifest: Callable[..., Path]) -> None:
        """Test YAML syntax errors raise ManifestError."""
        path = write_manifest("dependencies: [base\n")

        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)

        assert "Invalid YAML" in exc_info.value.message

    @pytest.mark.parametrize("content", ["", "- base\n", "just a string\n"])
    def test_non_mapping_top_level(
        self, write_manifest: Callable[..., Path], content: str
    ) -> None:
        """Test empty, list, or scalar documents are rejected."""
        path = write_manifest(content)

        with pytest.raises(ManifestError) as exc_info:
            load_manifest(path)

        assert "mapping" in exc_info.value.message


@pytest.mark.unit
class TestFindDependency:
    """Tests for find_dependency."""

    def test_string_entry(self) -> None:
        """Test the whole declaration is returned for string entries."""
        manifest = {"dependencies": ["text", "base >=4.14 && <4.19"]}
        assert find_dependency(manifest, "base") == "base >=4.14 && <4.19"

    def test_bare_name_entry(self) -> None:
        """Test an unconstrained string entry is found."""
        assert find_dependency({"dependencies": ["base"]}, "base") == "base"

    def test_similarly_named_package_is_not_matched(self) -> None:
        """Test 'base-compat' is not mistaken for 'base'."""
        manifest = {"dependencies": ["base-compat <0.14", "base <4.19"]}
        assert find_dependency(manifest, "base") == "base <4.19"

    def test_structured_entry(self) -> None:
        """Test name/version mappings return the range."""
        manifest = {"dependencies": [{"name": "base", "version": "<=4.18.2"}]}
        assert find_dependency(manifest, "base") == "<=4.18.2"

    def test_mapping_form(self) -> None:
        """Test hpack's name-to-range mapping is supported."""
        manifest = {"dependencies": {"base": ">=4.14 && <4.19", "text": None}}
        assert find_dependency(manifest, "base") == ">=4.14 && <4.19"

    def test_mapping_form_null_range(self) -> None:
        """Test a null range yields an empty declaration."""
        assert find_dependency({"dependencies": {"base": None}}, "base") == ""

    def test_absent_dependency(self) -> None:
        """Test a missing entry raises DependencyNotFoundError."""
        with pytest.raises(DependencyNotFoundError) as exc_info:
            find_dependency({"dependencies": ["text", {"name": "bytestring"}]}, "base")

        assert exc_info.value.dependency == "base"

    def test_absent_from_mapping_form(self) -> None:
        """Test a missing key in the mapping form raises DependencyNotFoundError."""
        with pytest.raises(DependencyNotFoundError):
            find_dependency({"dependencies": {"text": None}}, "base")

    @pytest.mark.parametrize("deps", [None, "base <4.19", 42])
    def test_invalid_dependencies_field(self, deps: object) -> None:
        """Test a missing or scalar dependencies field raises ManifestError."""
        manifest = {} if deps is None else {"dependencies": deps}

        with pytest.raises(ManifestError) as exc_info:
            find_dependency(manifest, "base")

        assert not isinstance(exc_info.value, DependencyNotFoundError)


@pytest.mark.unit
class TestReadUpperBound:
    """Tests for read_upper_bound."""

    def test_reads_bound(self, write_manifest: Callable[..., Path]) -> None:
        """Test the happy path from file to constraint."""
        path = write_manifest(
            "name: demo\n"
            "dependencies:\n"
            "  - base >=4.14 && <4.19\n"
            "  - text\n"
        )

        assert read_upper_bound(path, "base") == Constraint("4.19")

    def test_structured_bound(self, write_manifest: Callable[..., Path]) -> None:
        """Test structured entries are parsed the same way."""
        path = write_manifest(
            "dependencies:\n"
            "  - name: base\n"
            "    version: '<= 4.18.2'\n"
        )

        assert read_upper_bound(path, "base") == Constraint("4.18.2", inclusive=True)

    def test_no_bound(self, write_manifest: Callable[..., Path]) -> None:
        """Test a dependency without version range raises ConstraintNotFoundError."""
        path = write_manifest("dependencies:\n  - base\n")

        with pytest.raises(ConstraintNotFoundError) as exc_info:
            read_upper_bound(path, "base")

        assert exc_info.value.raw == "base"
