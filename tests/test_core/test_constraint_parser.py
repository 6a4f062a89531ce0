from __future__ import annotations

import pytest

from ghcpick.core.constraint_parser import parse_upper_bound, require_upper_bound
from ghcpick.exceptions import ConstraintNotFoundError
from ghcpick.models import Constraint


@pytest.mark.unit
class TestParseUpperBound:
    """Tests for parse_upper_bound."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("base >=4.14 && <4.19", Constraint("4.19", inclusive=False)),
            ("base < 4.19.0.0", Constraint("4.19.0.0", inclusive=False)),
            ("base <= 4.18.2", Constraint("4.18.2", inclusive=True)),
            ("base<=4", Constraint("4", inclusive=True)),
            (">=4.14 && <5", Constraint("5", inclusive=False)),
            ("base (>=4.14 && <4.19)", Constraint("4.19", inclusive=False)),
        ],
    )
    def test_extracts_bound(self, raw: str, expected: Constraint) -> None:
        """Test operator and version are captured for common forms."""
        assert parse_upper_bound(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["base", "", "base >=4.14", "base ==4.18.*", "base ^>=4.18", "base < next"],
    )
    def test_returns_none_without_upper_bound(self, raw: str) -> None:
        """Test declarations without '<' or '<=' clauses yield None."""
        assert parse_upper_bound(raw) is None

    def test_first_clause_wins(self) -> None:
        """Test only the leftmost upper bound is used."""
        assert parse_upper_bound("base <4.19 || <=4.20") == Constraint("4.19")
        assert parse_upper_bound("base <=4.20 && <4.19") == Constraint(
            "4.20", inclusive=True
        )

    def test_version_glued_to_letters_is_rejected(self) -> None:
        """Test a version followed by letters is not truncated into a bound."""
        assert parse_upper_bound("base <4.19x") is None

    def test_trailing_punctuation_is_not_part_of_version(self) -> None:
        """Test a sentence-ending dot or comma stays outside the version."""
        assert parse_upper_bound("base <4.19.") == Constraint("4.19")
        assert parse_upper_bound("base <4.19, foo") == Constraint("4.19")

    @pytest.mark.parametrize("raw", ["base <\uff14.19", "base <4.1\uff19"])
    def test_non_ascii_digits_are_not_a_bound(self, raw: str) -> None:
        """Test full-width digits never form a bound version."""
        assert parse_upper_bound(raw) is None

    def test_non_ascii_digits_raise_not_found(self) -> None:
        """Test a full-width bound is reported as a missing bound."""
        with pytest.raises(ConstraintNotFoundError):
            require_upper_bound("base <\uff14.19", dependency="base")


@pytest.mark.unit
class TestRequireUpperBound:
    """Tests for require_upper_bound."""

    def test_returns_constraint(self) -> None:
        """Test a present bound is returned unchanged."""
        assert require_upper_bound("base <4.19") == Constraint("4.19")

    def test_raises_when_missing(self) -> None:
        """Test a missing bound raises with the raw declaration attached."""
        with pytest.raises(ConstraintNotFoundError) as exc_info:
            require_upper_bound("base", dependency="base")

        assert exc_info.value.raw == "base"
        assert "No upper bound for base" in str(exc_info.value)
