"""Global pytest configuration.

Registers the fixture plugin `tests.algorithms.sample_graphs`. The plugin is
named here rather than imported so that pytest applies assertion rewriting to
it.
"""

from __future__ import annotations

from importlib.util import find_spec

pytest_plugins: list[str] = []
if find_spec("tests.algorithms.sample_graphs") is not None:
    pytest_plugins = ["tests.algorithms.sample_graphs"]
