"""Tests for environment parsing helpers."""

from __future__ import annotations

import pytest

from cf_common.config import parse_bool_env, parse_str_env


pytestmark = pytest.mark.unit_common


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_parse_bool_env_truthy(raw: str) -> None:
    assert parse_bool_env(raw) is True


def test_parse_bool_env_falsy_and_unset() -> None:
    assert parse_bool_env("off") is False
    assert parse_bool_env(None) is None


def test_parse_str_env_blank_is_unset() -> None:
    assert parse_str_env("  de  ") == "de"
    assert parse_str_env("   ") is None
    assert parse_str_env(None) is None
