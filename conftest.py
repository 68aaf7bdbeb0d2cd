from __future__ import annotations

import os
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent

root_path = str(ROOT_DIR)
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def _ensure_test_env() -> None:
    # Keep shell overrides out of the unit tests.
    for key in list(os.environ):
        if key.startswith("JSON_LOCALIZATION_"):
            os.environ.pop(key)


_ensure_test_env()


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without external services")
