"""Pytest configuration shared by the test suite."""

import sys
from pathlib import Path

# Put the project root (for ``tests`` and ``stats``) and ``src`` (for
# ``avl_trees`` when not installed) on sys.path.
_project_root = Path(__file__).resolve().parent
for _path in (str(_project_root), str(_project_root / "src")):
    if _path not in sys.path:
        sys.path.insert(0, _path)
