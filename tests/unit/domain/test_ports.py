"""Tests for domain/ports.py."""

import stackerr
from stackerr.domain.ports import MatchProtocol, UnwrapProtocol
from stackerr.infrastructure.errorfmt import FormattedError


class _Wrapper(Exception):
    def unwrap(self) -> BaseException:
        return KeyError("k")


class TestUnwrapProtocol:
    """Tests for UnwrapProtocol structural checks."""

    def test_structural_match(self) -> None:
        assert isinstance(_Wrapper(), UnwrapProtocol)

    def test_library_errors_implement_it(self) -> None:
        assert isinstance(FormattedError("x"), UnwrapProtocol)

    def test_plain_exception_does_not(self) -> None:
        assert not isinstance(ValueError("x"), UnwrapProtocol)


class TestMatchProtocol:
    """Tests for MatchProtocol structural checks."""

    def test_plain_exception_does_not(self) -> None:
        assert not isinstance(ValueError("x"), MatchProtocol)

    def test_traced_error_implements_it(self) -> None:
        assert isinstance(stackerr.new("x"), MatchProtocol)
