"""Output of a render pass: rendered cells plus per-cell errors."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from cf_common.api import CFError, RenderError, error_to_payload
from cf_format.colors.mapper import CellColor
from cf_format.selection import Coordinate


@dataclass(frozen=True)
class RenderedCell:
    """Display layer for one cell; the raw value is untouched."""

    text: str
    color: Optional[CellColor] = None
    missing: bool = False
    format_rule: Optional[int] = None
    color_rule: Optional[int] = None


@dataclass(frozen=True)
class CellError:
    coordinate: Coordinate
    error: CFError

    def to_dict(self) -> dict[str, Any]:
        payload = error_to_payload(self.error)
        payload["row"] = self.coordinate.row
        payload["column"] = self.coordinate.column
        return payload


class RenderResult:
    """Rendered text/colors for every cell of a table."""

    def __init__(
        self,
        column_names: Sequence[str],
        n_rows: int,
        cells: Mapping[Coordinate, RenderedCell],
        errors: Sequence[CellError] = (),
    ) -> None:
        self._column_names = tuple(column_names)
        self._n_rows = n_rows
        self._cells = MappingProxyType(dict(cells))
        self._errors = tuple(errors)

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._column_names

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def cells(self) -> Mapping[Coordinate, RenderedCell]:
        return self._cells

    @property
    def errors(self) -> tuple[CellError, ...]:
        return self._errors

    @property
    def ok(self) -> bool:
        return not self._errors

    def cell(self, row: int, column: str) -> RenderedCell:
        return self._cells[Coordinate(row, column)]

    def text(self, row: int, column: str) -> str:
        return self.cell(row, column).text

    def color(self, row: int, column: str) -> Optional[CellColor]:
        return self.cell(row, column).color

    def raise_for_errors(self) -> None:
        """Raise a RenderError carrying every cell failure, if there were any."""
        if not self._errors:
            return
        first = self._errors[0]
        raise RenderError(
            f"{len(self._errors)} cell(s) failed to render",
            errors=[item.error for item in self._errors],
            context={"cells": [item.to_dict() for item in self._errors]},
            cause=first.error,
        )

    def to_frame(self) -> pd.DataFrame:
        """Rendered text as a DataFrame shaped like the source table."""
        data = {
            name: pd.Series(
                [self._cells[Coordinate(row, name)].text for row in range(self._n_rows)],
                dtype=object,
            )
            for name in self._column_names
        }
        return pd.DataFrame(data, columns=list(self._column_names))

    def colors_frame(self, channel: str = "fill") -> pd.DataFrame:
        """One color channel (``fill`` or ``text``) per cell; None when unset."""
        if channel not in ("fill", "text"):
            raise ValueError(f"Unknown color channel: {channel}")
        data = {}
        for name in self._column_names:
            column = []
            for row in range(self._n_rows):
                color = self._cells[Coordinate(row, name)].color
                column.append(getattr(color, channel) if color else None)
            data[name] = pd.Series(column, dtype=object)
        return pd.DataFrame(data, columns=list(self._column_names))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RenderResult):
            return NotImplemented
        return (
            self._column_names == other._column_names
            and self._n_rows == other._n_rows
            and dict(self._cells) == dict(other._cells)
            and [e.to_dict() for e in self._errors] == [e.to_dict() for e in other._errors]
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"RenderResult(columns={list(self._column_names)!r}, n_rows={self._n_rows}, "
            f"errors={len(self._errors)})"
        )
