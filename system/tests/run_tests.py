"""Standalone runner for the system tests."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

HERE = Path(__file__).resolve().parent
BASE_DIR = HERE.parents[1]


def main() -> None:
    """Execute the system test suite."""

    for path in (str(BASE_DIR), str(HERE)):
        if path not in sys.path:
            sys.path.insert(0, path)
    suite = unittest.defaultTestLoader.discover(str(HERE), pattern="test_*.py", top_level_dir=str(HERE))
    unittest.TextTestRunner(verbosity=2).run(suite)


if __name__ == "__main__":  # pragma: no cover
    main()
