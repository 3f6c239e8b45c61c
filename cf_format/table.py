"""
Immutable tabular snapshot read by the formatting pipeline.

A Table holds named columns of raw cell values plus a missingness flag per
cell. Formatting never writes back into it; rendering produces a parallel
layer (see ``cf_format.engine.result``).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from cf_common.api import FormatConfigError, SelectionError


def is_missing(value: Any) -> bool:
    """Return True for None, NaN, NaT and ``pd.NA`` scalars."""
    if value is None:
        return True
    try:
        result = pd.isna(value)
    except (TypeError, ValueError):
        return False
    # Array-likes yield an array here; only scalars can be missing.
    return isinstance(result, (bool, np.bool_)) and bool(result)


def _unwrap_scalar(value: Any) -> Any:
    if isinstance(value, np.generic) and not isinstance(value, np.datetime64):
        return value.item()
    return value


@dataclass(frozen=True)
class Cell:
    """Raw value plus missingness flag."""

    value: Any
    missing: bool

    @classmethod
    def of(cls, value: Any) -> "Cell":
        value = _unwrap_scalar(value)
        return cls(value=value, missing=is_missing(value))


class Table:
    """Ordered, named columns of cells with positional row identity."""

    def __init__(self, columns: Mapping[Any, Sequence[Any]]) -> None:
        names: list[str] = []
        for key in columns:
            name = str(key)
            if not name:
                raise SelectionError("Column names must be non-empty")
            if name in names:
                raise SelectionError(
                    f"Duplicate column name: {name!r}", context={"column": name}
                )
            names.append(name)

        lengths = {len(values) for values in columns.values()}
        if len(lengths) > 1:
            raise FormatConfigError(
                "All columns must have the same number of rows",
                context={
                    "lengths": {str(key): len(values) for key, values in columns.items()}
                },
            )

        self._names: tuple[str, ...] = tuple(names)
        self._n_rows: int = lengths.pop() if lengths else 0
        self._columns: dict[str, tuple[Cell, ...]] = {
            name: tuple(Cell.of(value) for value in values)
            for name, values in zip(names, columns.values())
        }

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Mapping[str, Any]],
        columns: Optional[Sequence[str]] = None,
    ) -> "Table":
        """Build a table from row mappings; absent keys become missing cells."""
        if columns is None:
            ordered: list[str] = []
            for row in rows:
                for key in row:
                    if key not in ordered:
                        ordered.append(key)
            columns = ordered
        return cls({name: [row.get(name) for row in rows] for name in columns})

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "Table":
        """Snapshot a DataFrame; the index is dropped in favour of positions."""
        names = [str(col) for col in frame.columns]
        if len(set(names)) != len(names):
            raise SelectionError(
                "DataFrame has duplicate column names", context={"columns": names}
            )
        return cls({name: frame.iloc[:, pos].tolist() for pos, name in enumerate(names)})

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._names

    @property
    def n_rows(self) -> int:
        return self._n_rows

    @property
    def shape(self) -> tuple[int, int]:
        return self._n_rows, len(self._names)

    def __len__(self) -> int:
        return self._n_rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._columns

    def column(self, name: str) -> tuple[Cell, ...]:
        try:
            return self._columns[name]
        except KeyError:
            raise SelectionError(
                f"Unknown column: {name!r}", context={"column": name}
            ) from None

    def column_index(self, name: str) -> int:
        try:
            return self._names.index(name)
        except ValueError:
            raise SelectionError(
                f"Unknown column: {name!r}", context={"column": name}
            ) from None

    def cell(self, row: int, column: str) -> Cell:
        cells = self.column(column)
        if not 0 <= row < self._n_rows:
            raise SelectionError(
                f"Row index out of range: {row}",
                context={"row": row, "n_rows": self._n_rows},
            )
        return cells[row]

    def row_values(self, row: int) -> Mapping[str, Any]:
        """Read-only view of one row's raw values; missing cells read as None."""
        values = {}
        for name in self._names:
            cell = self._columns[name][row]
            values[name] = None if cell.missing else cell.value
        return MappingProxyType(values)

    def is_compatible(self, other: "Table") -> bool:
        """Same column names in the same order and the same row count."""
        return self._names == other.column_names and self._n_rows == other.n_rows

    def to_frame(self) -> pd.DataFrame:
        """Raw values as a DataFrame (missing cells become None)."""
        data = {
            name: pd.Series(
                [None if cell.missing else cell.value for cell in cells], dtype=object
            )
            for name, cells in self._columns.items()
        }
        return pd.DataFrame(data, columns=list(self._names))

    def __repr__(self) -> str:
        return f"Table(columns={list(self._names)!r}, n_rows={self._n_rows})"
