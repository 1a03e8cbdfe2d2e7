"""Tests for infrastructure/chain.py.

Tests:
- causes(): unwrap() hook, exception groups, __cause__, ignored __context__
- walk(): pre-order leftmost-first, cycle safety
- find() and matches()
"""

from stackerr.infrastructure.chain import causes, find, matches, walk


class _Multi(Exception):
    """Wrapper exposing several causes through unwrap()."""

    def __init__(self, *wrapped: BaseException) -> None:
        super().__init__("multi")
        self.wrapped = wrapped

    def unwrap(self) -> tuple[BaseException, ...]:
        return self.wrapped


class _Single(Exception):
    def __init__(self, inner: BaseException) -> None:
        super().__init__("single")
        self.inner = inner

    def unwrap(self) -> BaseException:
        return self.inner


class _NoLinks(Exception):
    def unwrap(self) -> None:
        return None


class _ForeignUnwrap(Exception):
    """Third-party exception whose unwrap() means something else."""

    def unwrap(self) -> str:
        return "payload"


class _ForeignMatches(Exception):
    """Third-party exception whose matches() returns a non-bool."""

    def matches(self, pattern: object) -> list[str]:
        return ["hit"]


class _NotCallable(Exception):
    unwrap = "attribute, not a method"


class _Equal(Exception):
    """Declares itself equal to any exception with the same message."""

    def matches(self, other: BaseException) -> bool:
        return str(other) == str(self)


def _caused(outer: BaseException, inner: BaseException) -> BaseException:
    outer.__cause__ = inner
    return outer


class TestCauses:
    """Tests for causes()."""

    def test_plain_exception_has_none(self) -> None:
        assert causes(ValueError("x")) == ()

    def test_explicit_cause(self) -> None:
        inner = KeyError("k")
        assert causes(_caused(ValueError("x"), inner)) == (inner,)

    def test_implicit_context_ignored(self) -> None:
        try:
            try:
                raise KeyError("k")
            except KeyError:
                raise ValueError("x")  # noqa: B904
        except ValueError as exc:
            assert exc.__context__ is not None
            assert causes(exc) == ()

    def test_unwrap_single(self) -> None:
        inner = KeyError("k")
        assert causes(_Single(inner)) == (inner,)

    def test_unwrap_many_keeps_order(self) -> None:
        a, b = KeyError("a"), KeyError("b")
        assert causes(_Multi(a, b)) == (a, b)

    def test_unwrap_none_falls_back_to_cause(self) -> None:
        inner = KeyError("k")
        assert causes(_caused(_NoLinks("x"), inner)) == (inner,)

    def test_foreign_unwrap_result_falls_back_to_cause(self) -> None:
        inner = KeyError("k")
        assert causes(_caused(_ForeignUnwrap("x"), inner)) == (inner,)

    def test_mixed_unwrap_sequence_falls_back_to_cause(self) -> None:
        inner = KeyError("k")
        err = _caused(_Multi(KeyError("a"), "not an error"), inner)  # type: ignore[arg-type]
        assert causes(err) == (inner,)

    def test_non_callable_unwrap_attribute_ignored(self) -> None:
        inner = KeyError("k")
        assert causes(_caused(_NotCallable("x"), inner)) == (inner,)

    def test_exception_group_members_then_cause(self) -> None:
        a, b, c = KeyError("a"), KeyError("b"), KeyError("c")
        group = ExceptionGroup("g", [a, b])
        group.__cause__ = c
        assert causes(group) == (a, b, c)


class TestWalk:
    """Tests for walk()."""

    def test_none_yields_nothing(self) -> None:
        assert list(walk(None)) == []

    def test_starts_with_err(self) -> None:
        err = ValueError("x")
        assert list(walk(err)) == [err]

    def test_preorder_leftmost_first(self) -> None:
        a1 = KeyError("a1")
        a = _caused(KeyError("a"), a1)
        b = KeyError("b")
        root = _Multi(a, b)
        assert list(walk(root)) == [root, a, a1, b]

    def test_cycle_visited_once(self) -> None:
        a, b = ValueError("a"), ValueError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert list(walk(a)) == [a, b]


class TestFind:
    """Tests for find()."""

    def test_finds_first_instance(self) -> None:
        first = KeyError("first")
        second = KeyError("second")
        root = _Multi(_caused(ValueError("v"), first), second)
        assert find(root, KeyError) is first

    def test_includes_err_itself(self) -> None:
        err = KeyError("k")
        assert find(err, LookupError) is err

    def test_not_found(self) -> None:
        assert find(ValueError("x"), KeyError) is None

    def test_none(self) -> None:
        assert find(None, KeyError) is None


class TestMatches:
    """Tests for matches()."""

    def test_identity(self) -> None:
        err = ValueError("x")
        assert matches(err, err)

    def test_found_deeper_in_chain(self) -> None:
        inner = KeyError("k")
        assert matches(_caused(ValueError("x"), inner), inner)

    def test_equal_message_is_not_a_match(self) -> None:
        assert not matches(ValueError("x"), ValueError("x"))

    def test_hook_declares_match(self) -> None:
        assert matches(_Equal("same"), ValueError("same"))
        assert not matches(_Equal("same"), ValueError("other"))

    def test_non_bool_hook_result_is_not_a_match(self) -> None:
        assert not matches(_ForeignMatches("x"), ValueError("y"))

    def test_none_handling(self) -> None:
        assert matches(None, None)
        assert not matches(None, ValueError("x"))
        assert not matches(ValueError("x"), None)
