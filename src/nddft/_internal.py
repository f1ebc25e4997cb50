from __future__ import annotations

from importlib.util import find_spec

MATPLOTLIB_ENABLED = find_spec("matplotlib") is not None
