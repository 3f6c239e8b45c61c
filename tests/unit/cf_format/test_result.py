"""Tests for RenderResult accessors and exports."""

from __future__ import annotations

import pytest

from cf_common.api import ParseError, RenderError
from cf_format.api import CellColor, Coordinate, FormatRuleSet, RenderedCell, RenderResult, Table


pytestmark = pytest.mark.unit_format


@pytest.fixture
def result() -> RenderResult:
    table = Table({"a": [1, "x"], "b": [None, 2.5]})
    rules = FormatRuleSet(table)
    rules.fmt_number("a", decimals=1).data_color("b", palette=["#000000", "#FFFFFF"], na_color="gray")
    return rules.render()


def test_to_frame_matches_table_shape(result: RenderResult) -> None:
    frame = result.to_frame()
    assert list(frame.columns) == ["a", "b"]
    assert frame["a"].tolist() == ["1.0", "x"]
    assert frame["b"].tolist() == ["NA", "2.5"]
    assert all(frame[name].dtype == object for name in frame.columns)


def test_colors_frame(result: RenderResult) -> None:
    fills = result.colors_frame("fill")
    assert fills["a"].tolist() == [None, None]
    assert fills["a"].dtype == object
    assert fills["b"].tolist() == ["#808080", "#000000"]
    texts = result.colors_frame("text")
    assert texts["b"].tolist()[1] == "#ffffff"
    with pytest.raises(ValueError):
        result.colors_frame("border")


def test_raise_for_errors(result: RenderResult) -> None:
    assert not result.ok
    with pytest.raises(RenderError) as excinfo:
        result.raise_for_errors()
    err = excinfo.value
    assert len(err.errors) == 1
    assert isinstance(err.errors[0], ParseError)
    assert err.context["cells"][0]["row"] == 1
    assert err.context["cells"][0]["column"] == "a"


def test_raise_for_errors_noop_when_clean() -> None:
    rendered = RenderResult(("a",), 1, {Coordinate(0, "a"): RenderedCell(text="1")})
    assert rendered.ok
    rendered.raise_for_errors()
    assert rendered.cell(0, "a") == RenderedCell(text="1")
    assert repr(rendered) == "RenderResult(columns=['a'], n_rows=1, errors=0)"


def test_cells_mapping_is_read_only(result: RenderResult) -> None:
    with pytest.raises(TypeError):
        result.cells[Coordinate(0, "a")] = RenderedCell(text="hacked")  # type: ignore[index]


def test_results_are_unhashable(result: RenderResult) -> None:
    with pytest.raises(TypeError):
        hash(result)


def test_cell_color_record(result: RenderResult) -> None:
    assert result.color(1, "b") == CellColor(fill="#000000", text="#ffffff")
