"""Immutable rule records held by a FormatRuleSet."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from cf_format.colors.mapper import ColorMapper
from cf_format.selection import Coordinate, RowSpec, resolve_rows
from cf_format.table import Table


class RuleKind(str, Enum):
    """Rule families; each resolves last-wins independently of the others."""

    FORMAT = "format"
    MISSING = "missing"
    COLOR = "color"


@dataclass(frozen=True, eq=False)
class FormatRule:
    """One registration: a config applied to resolved columns and a row spec.

    Columns are fixed at registration. Rows are resolved against whichever
    table is being rendered, so predicates always see that table's values.
    """

    sequence: int
    kind: RuleKind
    config: Any
    columns: tuple[str, ...]
    rows: RowSpec = None
    mapper: Optional[ColorMapper] = field(default=None, repr=False)

    def coordinates(self, table: Table) -> frozenset[Coordinate]:
        row_indices = resolve_rows(table, self.rows)
        return frozenset(
            Coordinate(row, column) for column in self.columns for row in row_indices
        )

    @property
    def label(self) -> str:
        return f"#{self.sequence}:{self.config.kind}"


@dataclass(frozen=True)
class ResolvedFormat:
    """Winning rules of each kind for one cell; recomputed every render."""

    coordinate: Coordinate
    format_rule: Optional[FormatRule] = None
    missing_rule: Optional[FormatRule] = None
    color_rule: Optional[FormatRule] = None
