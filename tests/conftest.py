"""
Shared fixtures.

Inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import numpy as np
import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from arraykit import core  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20231019)


@pytest.fixture
def debug_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Turn on the debug-only range and invariant checks for one test."""
    monkeypatch.setattr(core, "DEBUG", True)


@pytest.fixture
def release_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(core, "DEBUG", False)
