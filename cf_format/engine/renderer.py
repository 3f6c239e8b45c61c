"""
Per-cell rule resolution and rendering.

Row specs are resolved against the rendered table on every pass, then each
rule family is walked in registration order so later rules overwrite earlier
ones per coordinate. The survivor for a cell is the highest sequence number
that covers it. Nothing is cached between renders.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from cf_common.api import CFError, wrap_error
from cf_format.colors.mapper import CellColor, ColorScale
from cf_format.engine.result import CellError, RenderedCell, RenderResult
from cf_format.engine.rules import FormatRule, ResolvedFormat
from cf_format.formatters import FormatContext, default_text, format_value
from cf_format.selection import Coordinate
from cf_format.table import Table

logger = logging.getLogger(__name__)

Coverage = Mapping[int, frozenset[Coordinate]]


def rule_coverage(table: Table, rules: Iterable[FormatRule]) -> dict[int, frozenset[Coordinate]]:
    """Coordinates each rule targets in ``table``, keyed by sequence number."""
    return {rule.sequence: rule.coordinates(table) for rule in rules}


def _winners(rules: Iterable[FormatRule], coverage: Coverage) -> dict[Coordinate, FormatRule]:
    winners: dict[Coordinate, FormatRule] = {}
    for rule in sorted(rules, key=lambda item: item.sequence):
        for coordinate in coverage[rule.sequence]:
            winners[coordinate] = rule
    return winners


def resolve_formats(
    table: Table,
    format_rules: Sequence[FormatRule],
    missing_rules: Sequence[FormatRule],
    color_rules: Sequence[FormatRule],
    coverage: Optional[Coverage] = None,
) -> dict[Coordinate, ResolvedFormat]:
    """Winning rule of each family for every cell of ``table``."""
    if coverage is None:
        coverage = rule_coverage(table, [*format_rules, *missing_rules, *color_rules])
    formats = _winners(format_rules, coverage)
    missing = _winners(missing_rules, coverage)
    colors = _winners(color_rules, coverage)
    resolved: dict[Coordinate, ResolvedFormat] = {}
    for column in table.column_names:
        for row in range(table.n_rows):
            coordinate = Coordinate(row, column)
            resolved[coordinate] = ResolvedFormat(
                coordinate=coordinate,
                format_rule=formats.get(coordinate),
                missing_rule=missing.get(coordinate),
                color_rule=colors.get(coordinate),
            )
    return resolved


def _ordered(table: Table, coordinates: Iterable[Coordinate]) -> list[Coordinate]:
    positions = {name: pos for pos, name in enumerate(table.column_names)}
    return sorted(coordinates, key=lambda c: (positions[c.column], c.row))


def fit_color_scales(
    table: Table,
    color_rules: Sequence[FormatRule],
    coverage: Optional[Coverage] = None,
) -> dict[int, ColorScale]:
    """Fit each color rule on the non-missing values it selects."""
    if coverage is None:
        coverage = rule_coverage(table, color_rules)
    scales: dict[int, ColorScale] = {}
    for rule in color_rules:
        if rule.mapper is None:
            continue
        values: list[Any] = []
        for coordinate in _ordered(table, coverage[rule.sequence]):
            cell = table.cell(coordinate.row, coordinate.column)
            if not cell.missing:
                values.append(cell.value)
        scales[rule.sequence] = rule.mapper.fit(values)
    return scales


def _cell_error(coordinate: Coordinate, rule: FormatRule, exc: CFError) -> CellError:
    context = dict(exc.context)
    context.update({"row": coordinate.row, "column": coordinate.column, "rule": rule.label})
    error = wrap_error(type(exc), str(exc), context=context, cause=exc)
    return CellError(coordinate=coordinate, error=error)


def render_table(
    table: Table,
    format_rules: Sequence[FormatRule],
    missing_rules: Sequence[FormatRule],
    color_rules: Sequence[FormatRule],
    context: FormatContext,
    missing_text: str,
) -> RenderResult:
    """Render every cell; a failing cell is recorded and keeps its default text."""
    coverage = rule_coverage(table, [*format_rules, *missing_rules, *color_rules])
    resolved = resolve_formats(table, format_rules, missing_rules, color_rules, coverage)
    scales = fit_color_scales(table, color_rules, coverage)
    cells: dict[Coordinate, RenderedCell] = {}
    errors: list[CellError] = []

    for coordinate, winner in resolved.items():
        cell = table.cell(coordinate.row, coordinate.column)

        if cell.missing:
            rule = winner.missing_rule
            text = rule.config.missing_text if rule is not None else missing_text
        else:
            rule = winner.format_rule
            text = default_text(cell.value)
            if rule is not None:
                try:
                    text = format_value(cell.value, rule.config, context)
                except CFError as exc:
                    errors.append(_cell_error(coordinate, rule, exc))
                    logger.warning(
                        "Formatting failed for row %s column %s: %s",
                        coordinate.row,
                        coordinate.column,
                        exc,
                    )

        color: CellColor | None = None
        color_rule = winner.color_rule
        if color_rule is not None:
            scale = scales[color_rule.sequence]
            try:
                color = scale.colorize_missing() if cell.missing else scale.colorize(cell.value)
            except CFError as exc:
                errors.append(_cell_error(coordinate, color_rule, exc))
                logger.warning(
                    "Coloring failed for row %s column %s: %s",
                    coordinate.row,
                    coordinate.column,
                    exc,
                )

        cells[coordinate] = RenderedCell(
            text=text,
            color=color,
            missing=cell.missing,
            format_rule=rule.sequence if rule is not None else None,
            color_rule=color_rule.sequence if color_rule is not None else None,
        )

    logger.debug(
        "Rendered %d cells (%d rules, %d errors)",
        len(cells),
        len(format_rules) + len(missing_rules) + len(color_rules),
        len(errors),
    )
    return RenderResult(table.column_names, table.n_rows, cells, errors)
