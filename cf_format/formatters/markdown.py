"""Markdown pass-through formatter."""

from __future__ import annotations

import io
from typing import Any

from markdown_it import MarkdownIt
from rich.console import Console
from rich.markdown import Markdown

from cf_format.formatters.context import FormatContext
from cf_format.models.config import MarkdownFormat

_MARKDOWN = MarkdownIt("commonmark")


def _unwrap_paragraph(html: str) -> str:
    if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
        return html[3:-4]
    return html


def markdown_to_html(text: str) -> str:
    return _unwrap_paragraph(_MARKDOWN.render(text).strip())


def markdown_to_text(text: str, width: int = 80) -> str:
    console = Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        record=True,
    )
    console.print(Markdown(text))
    rendered = console.export_text(styles=False)
    # Rich pads justified lines to the console width.
    return "\n".join(line.rstrip() for line in rendered.splitlines()).strip()


def format_markdown(value: Any, config: MarkdownFormat, context: FormatContext) -> str:
    text = str(value)
    if config.target == "text":
        return markdown_to_text(text, config.width)
    return markdown_to_html(text)
