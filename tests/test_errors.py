"""Tests for custom exceptions and the error envelope."""

from __future__ import annotations

import pytest

from exodiscover.errors import (
    ErrorType,
    InvalidParameterError,
    MissingOptionalDependencyError,
    make_error,
)


class TestInvalidParameterError:
    def test_attributes_and_message(self) -> None:
        exc = InvalidParameterError("cadence", -1.0, "> 0")
        assert exc.parameter == "cadence"
        assert exc.value == -1.0
        assert exc.constraint == "> 0"
        assert "cadence" in str(exc)
        assert "> 0" in str(exc)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise InvalidParameterError("sample_count", 0, "> 0")

    def test_to_envelope(self) -> None:
        env = InvalidParameterError("transit_depth", 1.5, "0 <= transit_depth < 1").to_envelope()
        assert env.type is ErrorType.INVALID_PARAMETER
        assert env.context["parameter"] == "transit_depth"
        assert env.context["value"] == 1.5

    def test_envelope_reprs_non_scalar_values(self) -> None:
        env = InvalidParameterError("time", [1, -2], "finite and >= 0").to_envelope()
        assert env.context["value"] == "[1, -2]"


class TestMissingOptionalDependencyError:
    """Tests for MissingOptionalDependencyError exception."""

    def test_basic(self) -> None:
        exc = MissingOptionalDependencyError("plotting")
        assert exc.extra == "plotting"
        assert "plotting" in str(exc)
        assert "pip install" in str(exc)

    def test_custom_hint(self) -> None:
        exc = MissingOptionalDependencyError("plotting", install_hint="uv add exodiscover[plotting]")
        assert "uv add" in str(exc)

    def test_is_import_error(self) -> None:
        assert isinstance(MissingOptionalDependencyError("plotting"), ImportError)


def test_make_error_copies_context() -> None:
    env = make_error(ErrorType.UNKNOWN_ENTITY, "no such planet", key="X-1b")
    assert env.message == "no such planet"
    assert env.context == {"key": "X-1b"}
