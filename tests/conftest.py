from __future__ import annotations

import pytest

from grid2048.utils import config


@pytest.fixture(autouse=True)
def restore_config(monkeypatch):
    """Undo config overrides made by a test."""
    for name in ("GRID_WIDTH", "GRID_HEIGHT", "WIN_VALUE"):
        monkeypatch.setattr(config, name, getattr(config, name))
