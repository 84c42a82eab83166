"""Tests for depviz.core.settings module."""

from __future__ import annotations

import os
from unittest import mock

import pytest

from depviz.core.settings import DEFAULT_MAX_DEPTH, get_max_depth


class TestGetMaxDepth:
    """Tests for get_max_depth."""

    def test_default(self) -> None:
        with mock.patch.dict(os.environ, {"DEPVIZ_MAX_DEPTH": ""}):
            assert get_max_depth() == DEFAULT_MAX_DEPTH

    def test_unset(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "DEPVIZ_MAX_DEPTH"}
        with mock.patch.dict(os.environ, env, clear=True):
            assert get_max_depth() == DEFAULT_MAX_DEPTH

    def test_from_env(self) -> None:
        with mock.patch.dict(os.environ, {"DEPVIZ_MAX_DEPTH": " 25 "}):
            assert get_max_depth() == 25

    @pytest.mark.parametrize("raw", ["deep", "0", "-3", "1.5"])
    def test_invalid_values_fall_back(self, raw: str, caplog) -> None:
        with mock.patch.dict(os.environ, {"DEPVIZ_MAX_DEPTH": raw}):
            assert get_max_depth() == DEFAULT_MAX_DEPTH
        assert "Ignoring DEPVIZ_MAX_DEPTH" in caplog.text
