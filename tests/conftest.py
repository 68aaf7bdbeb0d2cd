from __future__ import annotations

import json
import threading
from collections import Counter
from pathlib import Path
from typing import Callable, Union

import pytest

from json_localization.config.settings import LocalizationSettings
from json_localization.i18n import context


class CountingReader:
    """File reader that records how often each path is read."""

    def __init__(self) -> None:
        self.reads: Counter = Counter()
        self._lock = threading.Lock()

    def __call__(self, path: Path) -> bytes:
        with self._lock:
            self.reads[str(path)] += 1
        return path.read_bytes()

    @property
    def total(self) -> int:
        return sum(self.reads.values())


@pytest.fixture
def resources_dir(tmp_path: Path) -> Path:
    path = tmp_path / "Resources"
    path.mkdir()
    return path


@pytest.fixture
def write_resource(resources_dir: Path) -> Callable[[str, Union[str, dict]], Path]:
    """Write ``<resources_dir>/<relative>``; dicts are dumped as JSON."""

    def _write(relative: str, content: Union[str, dict]) -> Path:
        path = resources_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, dict):
            content = json.dumps(content, ensure_ascii=False)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reader() -> CountingReader:
    return CountingReader()


@pytest.fixture
def settings(tmp_path: Path, resources_dir: Path) -> LocalizationSettings:
    return LocalizationSettings(
        base_directory=str(tmp_path),
        resources_path=resources_dir.name,
        root_namespace="myapp",
        default_culture="en",
    )


@pytest.fixture(autouse=True)
def _reset_default_culture():
    context.set_default_ui_culture("en")
    yield
    context.set_default_ui_culture(None)
