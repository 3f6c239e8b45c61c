"""Rule resolution and rendering."""

from .renderer import render_table, resolve_formats
from .result import CellError, RenderedCell, RenderResult
from .rule_set import FormatRuleSet
from .rules import FormatRule, ResolvedFormat, RuleKind

__all__ = [
    "CellError",
    "FormatRule",
    "FormatRuleSet",
    "RenderResult",
    "RenderedCell",
    "ResolvedFormat",
    "RuleKind",
    "render_table",
    "resolve_formats",
]
