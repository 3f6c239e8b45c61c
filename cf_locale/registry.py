"""Registry for named color palettes (built-in + entry points)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from cf_common.api import (
    FormatConfigError,
    ReferenceLookupError,
    discover_entrypoints,
    load_pending_entrypoints,
)
from cf_locale.palettes import PALETTES

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "cellfmt.palettes"


class PaletteRegistry:
    """PaletteProvider that merges built-in, registered and entry-point palettes.

    Entry points under ``cellfmt.palettes`` are discovered at construction and
    loaded only when a lookup misses. Each entry point resolves to a sequence
    of colors, or a zero-argument callable returning one.
    """

    def __init__(
        self,
        palettes: Optional[Mapping[str, Sequence[str]]] = None,
        *,
        include_builtin: bool = True,
    ) -> None:
        self._palettes: Dict[str, tuple[str, ...]] = {}
        self._pending_entrypoints: Dict[str, Any] = {}
        if include_builtin:
            self._palettes.update(PALETTES)
        for name, colors in (palettes or {}).items():
            self.register(name, colors)
        self._discover_entrypoint_palettes()

    def register(self, name: str, colors: Any) -> None:
        """Register (or replace) a palette.

        Raises FormatConfigError when ``colors`` is not a non-empty sequence.
        """
        if callable(colors):
            colors = colors()
        if isinstance(colors, str) or not isinstance(colors, Iterable):
            raise FormatConfigError(
                f"Palette {name!r} must be a sequence of colors", context={"palette": name}
            )
        resolved = tuple(str(color) for color in colors)
        if not resolved:
            raise FormatConfigError(f"Palette {name!r} is empty", context={"palette": name})
        self._palettes[name] = resolved
        logger.debug("Registered palette %s with %d colors", name, len(resolved))

    def get_palette(self, name: str) -> tuple[str, ...]:
        palette = self._lookup(name)
        if palette is None and self._pending_entrypoints:
            self._load_pending_entrypoints()
            palette = self._lookup(name)
        if palette is None:
            raise ReferenceLookupError(
                f"Unknown palette: {name!r}",
                context={"palette": name, "available": sorted(self._palettes)},
            )
        return palette

    def available(self, load_entrypoints: bool = False) -> Dict[str, tuple[str, ...]]:
        """Return available palettes."""
        if load_entrypoints:
            self._load_pending_entrypoints()
        return dict(self._palettes)

    def _lookup(self, name: str) -> Optional[tuple[str, ...]]:
        if name in self._palettes:
            return self._palettes[name]
        folded = name.casefold()
        for key, palette in self._palettes.items():
            if key.casefold() == folded:
                return palette
        return None

    def _discover_entrypoint_palettes(self) -> None:
        """Collect entry points without importing them. Loaded on demand."""
        self._pending_entrypoints = discover_entrypoints([ENTRYPOINT_GROUP])

    def _load_pending_entrypoints(self) -> None:
        load_pending_entrypoints(
            self._pending_entrypoints, self.register, label="palette entry point"
        )
