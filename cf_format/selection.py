"""
Resolve column/row targeting specs into concrete cell coordinates.

Column specs:
    ``ALL`` (default), a name, an index (negative counts from the end), a
    list mixing names and indices, a ``range``, a ``slice``, or a callable
    ``(name) -> bool`` such as ``starts_with("pop_")``.

Row specs:
    ``None`` (all rows), an index, a list of indices, a ``range``, a
    ``slice``, or a predicate ``(row_values) -> bool``. ``where(column, fn)``
    builds a predicate over a single column.

Predicates must be pure: they receive a read-only mapping of the row's raw
values (missing cells read as ``None``) and are evaluated once per row each
time a rule set renders.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, NamedTuple, Sequence, Union

from cf_common.api import SelectionError
from cf_format.table import Table


class _AllColumns:
    _instance: "_AllColumns | None" = None

    def __new__(cls) -> "_AllColumns":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ALL"


ALL = _AllColumns()


class Coordinate(NamedTuple):
    row: int
    column: str


RowPredicate = Callable[[Mapping[str, Any]], Any]
ColumnSpec = Union[_AllColumns, str, int, Sequence[Union[str, int]], range, slice, Callable[[str], Any]]
RowSpec = Union[None, int, Sequence[int], range, slice, RowPredicate]


class ColumnPredicate:
    """Row predicate over a single column's raw value.

    Missing values never match.
    """

    def __init__(self, column: str, predicate: Callable[[Any], Any]) -> None:
        self.column = column
        self.predicate = predicate

    def __call__(self, row: Mapping[str, Any]) -> bool:
        value = row[self.column]
        if value is None:
            return False
        return bool(self.predicate(value))

    def __repr__(self) -> str:
        return f"where({self.column!r}, {self.predicate!r})"


def where(column: str, predicate: Callable[[Any], Any]) -> ColumnPredicate:
    """Match rows whose raw ``column`` value satisfies ``predicate``."""
    return ColumnPredicate(column, predicate)


class _NameMatcher:
    def __init__(self, label: str, test: Callable[[str], bool]) -> None:
        self._label = label
        self._test = test

    def __call__(self, name: str) -> bool:
        return self._test(name)

    def __repr__(self) -> str:
        return self._label


def starts_with(prefix: str) -> Callable[[str], bool]:
    return _NameMatcher(f"starts_with({prefix!r})", lambda name: name.startswith(prefix))


def ends_with(suffix: str) -> Callable[[str], bool]:
    return _NameMatcher(f"ends_with({suffix!r})", lambda name: name.endswith(suffix))


def contains(text: str) -> Callable[[str], bool]:
    return _NameMatcher(f"contains({text!r})", lambda name: text in name)


def matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return _NameMatcher(
        f"matches({pattern!r})", lambda name: compiled.search(name) is not None
    )


def _column_at(table: Table, index: int) -> str:
    names = table.column_names
    if not -len(names) <= index < len(names):
        raise SelectionError(
            f"Column index out of range: {index}",
            context={"index": index, "n_columns": len(names)},
        )
    return names[index]


def _column_item(table: Table, item: Any) -> str:
    if isinstance(item, bool):
        raise SelectionError(
            f"Invalid column reference: {item!r}", context={"column": item}
        )
    if isinstance(item, int):
        return _column_at(table, item)
    if isinstance(item, str):
        if item not in table:
            raise SelectionError(
                f"Unknown column: {item!r}",
                context={"column": item, "available": list(table.column_names)},
            )
        return item
    raise SelectionError(
        f"Invalid column reference: {item!r}", context={"column": item}
    )


def _dedupe(items: Iterable[Any]) -> tuple:
    return tuple(dict.fromkeys(items))


def resolve_columns(table: Table, columns: ColumnSpec = ALL) -> tuple[str, ...]:
    """Resolve a column spec to column names, in the order given."""
    names = table.column_names
    if columns is ALL:
        return names
    if isinstance(columns, (str, int)):
        return (_column_item(table, columns),)
    if isinstance(columns, slice):
        return names[columns]
    if isinstance(columns, range):
        return _dedupe(_column_at(table, index) for index in columns)
    if callable(columns):
        try:
            return tuple(name for name in names if columns(name))
        except Exception as exc:
            raise SelectionError(
                "Column matcher failed", context={"matcher": repr(columns)}, cause=exc
            ) from exc
    if isinstance(columns, Iterable):
        return _dedupe(_column_item(table, item) for item in columns)
    raise SelectionError(
        f"Unsupported column spec: {columns!r}", context={"columns": repr(columns)}
    )


def _row_at(table: Table, index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise SelectionError(f"Invalid row reference: {index!r}", context={"row": index})
    if not 0 <= index < table.n_rows:
        raise SelectionError(
            f"Row index out of range: {index}",
            context={"row": index, "n_rows": table.n_rows},
        )
    return index


def _check_predicate(table: Table, predicate: RowPredicate) -> None:
    if isinstance(predicate, ColumnPredicate) and predicate.column not in table:
        raise SelectionError(
            f"Unknown column in row predicate: {predicate.column!r}",
            context={"column": predicate.column},
        )


def _evaluate_predicate(table: Table, predicate: RowPredicate) -> tuple[int, ...]:
    _check_predicate(table, predicate)
    selected: list[int] = []
    for row in range(table.n_rows):
        try:
            keep = predicate(table.row_values(row))
        except Exception as exc:
            raise SelectionError(
                f"Row predicate failed at row {row}: {exc}",
                context={"row": row, "predicate": repr(predicate)},
                cause=exc,
            ) from exc
        if keep:
            selected.append(row)
    return tuple(selected)


def resolve_rows(table: Table, rows: RowSpec = None) -> tuple[int, ...]:
    """Resolve a row spec to ascending, deduplicated row indices."""
    if rows is None:
        return tuple(range(table.n_rows))
    if isinstance(rows, bool):
        raise SelectionError(f"Invalid row reference: {rows!r}", context={"row": rows})
    if isinstance(rows, int):
        return (_row_at(table, rows),)
    if isinstance(rows, slice):
        return tuple(range(table.n_rows)[rows])
    if callable(rows):
        return _evaluate_predicate(table, rows)
    if isinstance(rows, Iterable) and not isinstance(rows, (str, bytes)):
        return tuple(sorted({_row_at(table, index) for index in rows}))
    raise SelectionError(f"Unsupported row spec: {rows!r}", context={"rows": repr(rows)})


def prepare_rows(table: Table, rows: RowSpec = None) -> RowSpec:
    """Validate a row spec without reading cell values.

    Index-based specs come back as a tuple of checked row indices. Predicates
    come back unchanged, to be evaluated against each rendered table; only a
    ``where`` column is checked here.
    """
    if rows is None:
        return None
    if callable(rows):
        _check_predicate(table, rows)
        return rows
    return resolve_rows(table, rows)


@dataclass(frozen=True)
class Selector:
    """A columns x rows target, resolved against a table on demand."""

    columns: ColumnSpec = ALL
    rows: RowSpec = None

    def resolve(self, table: Table) -> frozenset[Coordinate]:
        return resolve(table, self.columns, self.rows)


def resolve(
    table: Table, columns: ColumnSpec = ALL, rows: RowSpec = None
) -> frozenset[Coordinate]:
    """Resolve columns x rows into a deduplicated set of coordinates.

    An empty result is valid.
    """
    column_names = resolve_columns(table, columns)
    row_indices = resolve_rows(table, rows)
    return frozenset(
        Coordinate(row, column) for column in column_names for row in row_indices
    )
