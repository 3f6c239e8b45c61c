"""Tests for entry-point discovery helpers."""

from __future__ import annotations

import importlib.metadata

import pytest

from cf_common.discovery.entrypoints import discover_entrypoints, load_pending_entrypoints


pytestmark = pytest.mark.unit_common


def test_discover_entrypoints_handles_errors(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def raise_error():
        raise RuntimeError("boom")

    monkeypatch.setattr(importlib.metadata, "entry_points", raise_error)

    result = discover_entrypoints(["cellfmt.palettes"])
    assert result == {}


def test_discover_entrypoints_collects_entries(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fake_entry = importlib.metadata.EntryPoint(
        name="demo", value="demo.module:OBJ", group="cellfmt.palettes"
    )

    class FakeEntries:
        def select(self, group: str):
            assert group == "cellfmt.palettes"
            return [fake_entry]

    monkeypatch.setattr(importlib.metadata, "entry_points", lambda: FakeEntries())

    result = discover_entrypoints(["cellfmt.palettes"])
    assert result["demo"] == fake_entry


def test_load_pending_entrypoints_registers_and_drains() -> None:
    class FakeEntryPoint:
        name = "ocean"

        def load(self):
            return ["#000080", "#00FFFF"]

    class BrokenEntryPoint:
        name = "broken"

        def load(self):
            raise ImportError("missing optional dependency")

    registered: dict[str, object] = {}
    pending = {"ocean": FakeEntryPoint(), "broken": BrokenEntryPoint()}

    load_pending_entrypoints(pending, registered.__setitem__, label="palette")

    assert registered == {"ocean": ["#000080", "#00FFFF"]}
    assert pending == {}
