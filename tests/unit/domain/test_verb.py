"""Tests for domain/verb.py."""

import pytest

from stackerr.domain.verb import RenderVerb


class TestRenderVerbParse:
    """Tests for RenderVerb.parse."""

    @pytest.mark.parametrize("spec", ["", "v", "s"])
    def test_generic(self, spec: str) -> None:
        assert RenderVerb.parse(spec) is RenderVerb.GENERIC

    @pytest.mark.parametrize("spec", ["+v", "+"])
    def test_detailed(self, spec: str) -> None:
        assert RenderVerb.parse(spec) is RenderVerb.DETAILED

    def test_quoted(self) -> None:
        assert RenderVerb.parse("q") is RenderVerb.QUOTED

    @pytest.mark.parametrize("spec", ["d", "x", ">10", "+s", "vv"])
    def test_other(self, spec: str) -> None:
        assert RenderVerb.parse(spec) is RenderVerb.OTHER
