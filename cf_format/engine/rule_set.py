"""
The cell formatting pipeline.

A ``FormatRuleSet`` is attached to one Table. Each registration call appends
one immutable rule carrying its resolved column names, its row spec and a
sequence number. Registration never reads cell values. ``render`` evaluates
row specs against the table being rendered, then resolves, per cell, the last
registered rule of each family (value format, missing-value substitution,
color) and applies it.

Registration is order-sensitive and not thread-safe; callers sharing a rule
set across threads must serialize registration. Rendering does not mutate the
rule set or the table.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Mapping, Optional

import pandas as pd

from cf_common.api import FormatConfigError, ReferenceLookupError, SelectionError
from cf_format.colors.mapper import ColorMapper
from cf_format.engine.renderer import render_table
from cf_format.engine.result import RenderResult
from cf_format.engine.rules import FormatRule, RuleKind
from cf_format.formatters import FormatContext
from cf_format.formatters.numeric import resolve_currency
from cf_format.formatters.temporal import date_pattern, time_pattern
from cf_format.models.config import (
    ColorFormat,
    CurrencyFormat,
    DateFormat,
    DatetimeFormat,
    IntegerFormat,
    MarkdownFormat,
    MissingFormat,
    NumberFormat,
    PercentFormat,
    ScientificFormat,
    TimeFormat,
    build_config,
    parse_format_config,
)
from cf_format.models.settings import FormatSettings
from cf_format.selection import ALL, ColumnSpec, RowSpec, Selector, prepare_rows, resolve_columns
from cf_format.table import Table
from cf_locale.api import BuiltinLocaleProvider, LocaleProvider, PaletteProvider, PaletteRegistry

logger = logging.getLogger(__name__)

_NUMERIC_KINDS = frozenset({"number", "integer", "percent", "currency", "scientific"})
_TEMPORAL_KINDS = frozenset({"date", "time", "datetime"})


class FormatRuleSet:
    """Ordered formatting and coloring rules for one table."""

    def __init__(
        self,
        table: Table,
        *,
        locale_provider: Optional[LocaleProvider] = None,
        palette_provider: Optional[PaletteProvider] = None,
        settings: Optional[FormatSettings] = None,
    ) -> None:
        self._table = table
        self._locale_provider = locale_provider or BuiltinLocaleProvider()
        self._palette_provider = palette_provider or PaletteRegistry()
        self._settings = settings or FormatSettings()
        self._sequence = itertools.count(1)
        self._format_rules: list[FormatRule] = []
        self._missing_rules: list[FormatRule] = []
        self._color_rules: list[FormatRule] = []

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, **kwargs: Any) -> "FormatRuleSet":
        return cls(Table.from_frame(frame), **kwargs)

    @property
    def table(self) -> Table:
        return self._table

    @property
    def settings(self) -> FormatSettings:
        return self._settings

    @property
    def rules(self) -> tuple[FormatRule, ...]:
        return tuple(self._format_rules)

    @property
    def missing_rules(self) -> tuple[FormatRule, ...]:
        return tuple(self._missing_rules)

    @property
    def color_rules(self) -> tuple[FormatRule, ...]:
        return tuple(self._color_rules)

    def _context(self) -> FormatContext:
        return FormatContext(self._locale_provider, self._settings.locale)

    # --- registration -----------------------------------------------------

    def register_rule(self, selector: Selector, config: Any) -> FormatRule:
        """Validate ``config``, resolve ``selector`` and append a rule.

        ``config`` is a config model or a ``{"kind": ...}`` mapping. Static
        problems (bad options, unknown locale/currency/palette/style) raise
        here rather than at render time.
        """
        config = parse_format_config(config)
        mapper = self._validate(config)
        columns = resolve_columns(self._table, selector.columns)
        rows = prepare_rows(self._table, selector.rows)
        if config.kind == "missing":
            kind = RuleKind.MISSING
        elif config.kind == "color":
            kind = RuleKind.COLOR
        else:
            kind = RuleKind.FORMAT
        rule = FormatRule(
            sequence=next(self._sequence),
            kind=kind,
            config=config,
            columns=columns,
            rows=rows,
            mapper=mapper,
        )
        {
            RuleKind.FORMAT: self._format_rules,
            RuleKind.MISSING: self._missing_rules,
            RuleKind.COLOR: self._color_rules,
        }[kind].append(rule)
        logger.debug(
            "Registered rule %s on columns %s rows %r",
            rule.label,
            list(columns),
            rows,
        )
        return rule

    def _validate(self, config: Any) -> Optional[ColorMapper]:
        context = self._context()
        locale = context.resolve_locale(getattr(config, "locale", None))
        if locale is not None and (config.kind in _NUMERIC_KINDS or config.kind in _TEMPORAL_KINDS):
            # Unknown locales surface as ReferenceLookupError.
            self._locale_provider.get_separators(locale)
        if isinstance(config, CurrencyFormat):
            resolve_currency(config, context)
        if config.kind in ("date", "datetime"):
            self._check_style(date_pattern, config.date_style, context)
        if config.kind in ("time", "datetime"):
            self._check_style(time_pattern, config.time_style, context)
        if isinstance(config, ColorFormat):
            return ColorMapper(
                config,
                self._palette_provider,
                default_palette=self._settings.palette,
                default_na_color=self._settings.na_color,
            )
        return None

    @staticmethod
    def _check_style(resolver: Any, style: int | str, context: FormatContext) -> None:
        try:
            resolver(style, context)
        except ReferenceLookupError as exc:
            raise FormatConfigError(
                f"Unrecognized style: {style!r}", context=exc.context, cause=exc
            ) from exc

    def _add(
        self,
        model: type,
        columns: ColumnSpec,
        rows: RowSpec,
        options: Mapping[str, Any],
    ) -> "FormatRuleSet":
        self.register_rule(Selector(columns, rows), build_config(model, options))
        return self

    def fmt_number(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(NumberFormat, columns, rows, options)

    def fmt_integer(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(IntegerFormat, columns, rows, options)

    def fmt_percent(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(PercentFormat, columns, rows, options)

    def fmt_currency(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(CurrencyFormat, columns, rows, options)

    def fmt_scientific(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(ScientificFormat, columns, rows, options)

    def fmt_date(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(DateFormat, columns, rows, options)

    def fmt_time(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(TimeFormat, columns, rows, options)

    def fmt_datetime(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(DatetimeFormat, columns, rows, options)

    def fmt_markdown(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(MarkdownFormat, columns, rows, options)

    def fmt_missing(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(MissingFormat, columns, rows, options)

    sub_missing = fmt_missing

    def data_color(self, columns: ColumnSpec = ALL, rows: RowSpec = None, **options: Any) -> "FormatRuleSet":
        return self._add(ColorFormat, columns, rows, options)

    def clear(self) -> None:
        """Drop every rule; sequence numbers keep increasing."""
        self._format_rules.clear()
        self._missing_rules.clear()
        self._color_rules.clear()

    # --- rendering ----------------------------------------------------------

    def render(self, table: Optional[Table] = None) -> RenderResult:
        """Render the attached table, or a structurally identical snapshot of it.

        Row predicates are evaluated against the rendered table; a predicate
        that raises surfaces as a ``SelectionError``.
        """
        target = self._table if table is None else table
        if not self._table.is_compatible(target):
            raise SelectionError(
                "Table does not match the one this rule set was built for",
                context={
                    "expected_columns": list(self._table.column_names),
                    "expected_rows": self._table.n_rows,
                    "columns": list(target.column_names),
                    "rows": target.n_rows,
                },
            )
        return render_table(
            target,
            self._format_rules,
            self._missing_rules,
            self._color_rules,
            self._context(),
            self._settings.missing_text,
        )
