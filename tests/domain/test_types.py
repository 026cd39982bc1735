"""Tests for shared enums."""

from weblinker.domain.types import CommandKeyword, ErrorCode, TraversalStrategy


class TestEnums:
    def test_error_codes_are_strings(self) -> None:
        assert ErrorCode.DUPLICATE_PAGE == "DUPLICATE_PAGE"
        assert ErrorCode("UNKNOWN_PAGE") is ErrorCode.UNKNOWN_PAGE

    def test_keywords(self) -> None:
        assert [k.value for k in CommandKeyword] == ["@addPages", "@addLinks", "@isConnected"]

    def test_strategies(self) -> None:
        assert TraversalStrategy("recursive") is TraversalStrategy.RECURSIVE
        assert str(TraversalStrategy.ITERATIVE) == "iterative"
