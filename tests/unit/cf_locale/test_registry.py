"""Tests for the palette registry."""

from __future__ import annotations

import importlib.metadata

import pytest

from cf_common.api import FormatConfigError, ReferenceLookupError
from cf_locale.api import PaletteProvider, PaletteRegistry


pytestmark = pytest.mark.unit_locale


@pytest.fixture(autouse=True)
def _no_installed_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    class NoEntries:
        def select(self, group: str):
            return []

    monkeypatch.setattr(importlib.metadata, "entry_points", lambda: NoEntries())


def test_builtin_palettes_are_available() -> None:
    registry = PaletteRegistry()
    assert isinstance(registry, PaletteProvider)
    viridis = registry.get_palette("viridis")
    assert viridis[0] == "#440154"
    assert viridis[-1] == "#FDE725"


def test_lookup_falls_back_to_casefold() -> None:
    registry = PaletteRegistry()
    assert registry.get_palette("blues") == registry.get_palette("Blues")


def test_register_custom_palette_and_callable() -> None:
    registry = PaletteRegistry({"mono": ["#000000", "#FFFFFF"]}, include_builtin=False)
    registry.register("warm", lambda: ("red", "orange"))
    assert registry.get_palette("mono") == ("#000000", "#FFFFFF")
    assert registry.get_palette("warm") == ("red", "orange")
    assert sorted(registry.available()) == ["mono", "warm"]


def test_register_rejects_bad_palettes() -> None:
    registry = PaletteRegistry(include_builtin=False)
    with pytest.raises(FormatConfigError) as excinfo:
        registry.register("bad", "#FFFFFF")
    assert excinfo.value.context == {"palette": "bad"}
    with pytest.raises(FormatConfigError) as excinfo:
        registry.register("empty", [])
    assert excinfo.value.context == {"palette": "empty"}
    assert "empty" not in registry.available()


def test_unknown_palette_raises() -> None:
    registry = PaletteRegistry()
    with pytest.raises(ReferenceLookupError) as excinfo:
        registry.get_palette("no-such-palette")
    assert excinfo.value.context["palette"] == "no-such-palette"


def test_entry_point_palettes_load_on_miss(monkeypatch: pytest.MonkeyPatch) -> None:
    loads: list[str] = []

    class FakeEntryPoint:
        name = "ocean"

        def load(self):
            loads.append(self.name)
            return ["#000080", "#00FFFF"]

    class FakeEntries:
        def select(self, group: str):
            assert group == "cellfmt.palettes"
            return [FakeEntryPoint()]

    monkeypatch.setattr(importlib.metadata, "entry_points", lambda: FakeEntries())

    registry = PaletteRegistry()
    registry.get_palette("viridis")
    assert loads == []
    assert registry.get_palette("ocean") == ("#000080", "#00FFFF")
    assert loads == ["ocean"]
