from __future__ import annotations

import os
from collections.abc import Mapping
from types import MappingProxyType

EnvironmentSnapshot = Mapping[str, str]


def snapshot_environment(
    source: Mapping[str, str] | None = None,
) -> EnvironmentSnapshot:
    """Return a read-only copy of ``source`` (``os.environ`` by default)."""
    values = os.environ if source is None else source
    return MappingProxyType(dict(values))


def is_true(env: EnvironmentSnapshot, name: str) -> bool:
    # Only the exact lowercase literal counts; "1" or "True" do not.
    return env.get(name) == "true"
