"""Tests for operation-specific Rich renderers."""

from weblinker.domain.types import ErrorCode
from weblinker.output.renderers import render_answer, render_quiet, render_result
from weblinker.services.result import ServiceResult, failure

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


# ── Answers ──────────────────────────────────────────────────────────


class TestAnswerRenderer:
    def test_connected(self) -> None:
        assert render_answer(_ok("is_connected", connected=True)) == "1"

    def test_not_connected(self) -> None:
        assert render_answer(_ok("is_connected", connected=False)) == "0"

    def test_render_result_prints_bare_answer(self) -> None:
        result = _ok("is_connected", source="a", target="b", connected=True)
        assert render_result(result) == "1"
        assert render_result(result, verbose=True) == "1"


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        result = failure("add_page", ErrorCode.DUPLICATE_PAGE, "There is already a page named 'a'")
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "add_page" in output
        assert "There is already a page named 'a'" in output
        assert "DUPLICATE_PAGE" not in output

    def test_verbose_shows_code_and_detail(self) -> None:
        result = failure("add_link", ErrorCode.UNKNOWN_PAGE, "missing", missing=["ghost"])
        output = render_result(result, verbose=True)
        assert "code: UNKNOWN_PAGE" in output
        assert "missing: ['ghost']" in output

    def test_brackets_not_treated_as_markup(self) -> None:
        result = failure("parse", ErrorCode.MALFORMED_COMMAND, "Unknown command '[bold]x'")
        assert "[bold]x" in render_result(result)

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output


# ── Mutations ────────────────────────────────────────────────────────


class TestMutationRenderer:
    def test_add_page(self) -> None:
        output = render_result(_ok("add_page", name="home", position=0))
        assert output.splitlines()[0].startswith("OK")
        assert "add_page" in output
        assert "name: home" in output
        assert "position: 0" in output

    def test_add_link(self) -> None:
        output = render_result(_ok("add_link", source="a", target="b", out_degree=1))
        assert "a -> b" in output
        assert "out_degree" not in output

    def test_add_link_verbose(self) -> None:
        output = render_result(_ok("add_link", source="a", target="b", out_degree=2), verbose=True)
        assert "out_degree: 2" in output


# ── Quiet mode ───────────────────────────────────────────────────────


class TestQuiet:
    def test_answers_kept(self) -> None:
        assert render_quiet(_ok("is_connected", connected=False)) == "0"

    def test_mutations_hidden(self) -> None:
        assert render_quiet(_ok("add_page", name="a")) == ""

    def test_errors_hidden(self) -> None:
        assert render_quiet(failure("add_page", ErrorCode.DUPLICATE_PAGE, "dup")) == ""
