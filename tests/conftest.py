"""Pytest configuration and test categorization.

We keep a flat `tests/` layout, but categorize tests into `unit`,
`regression`, `e2e` and `benchmark` via markers so CI can run targeted subsets.
"""

from __future__ import annotations

import os
import pathlib
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from blas.loader import ENV_VAR, reset_level2_cache  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    for name in ("unit", "regression", "e2e", "benchmark"):
        config.addinivalue_line("markers", f"{name}: {name} tests")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-apply test category markers based on filename conventions."""
    for item in items:
        path = pathlib.Path(str(item.fspath))
        name = path.name.lower()

        if "benchmark" in name:
            item.add_marker(pytest.mark.benchmark)
            continue

        if "e2e" in name or "end_to_end" in name:
            item.add_marker(pytest.mark.e2e)
            continue

        if "regression" in name:
            item.add_marker(pytest.mark.regression)
            continue

        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _isolated_backend(monkeypatch):
    """Every test starts from the default backend with an empty cache."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    reset_level2_cache()
    yield
    reset_level2_cache()
