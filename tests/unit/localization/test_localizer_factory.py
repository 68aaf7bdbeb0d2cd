from __future__ import annotations

import sys
import threading
from types import SimpleNamespace

import pytest

from json_localization.config.settings import LocalizationSettings
from json_localization.exceptions import InvalidArgumentError
from json_localization.localization import factory as factory_module
from json_localization.localization.factory import (
    JsonStringLocalizerFactory,
    entry_point_name,
    full_type_name,
    trim_prefix,
)


def _make_type(module: str, name: str) -> type:
    return type(name, (), {"__module__": module})


@pytest.fixture
def factory(settings):
    return JsonStringLocalizerFactory(settings)


@pytest.mark.unit
def test_create_strips_root_namespace(factory):
    home = _make_type("myapp.controllers", "Home")

    localizer = factory.create(home)

    assert localizer.resource_name == "controllers.Home"


@pytest.mark.unit
def test_create_keeps_names_outside_root_namespace(factory):
    other = _make_type("otherapp.views", "Index")

    assert factory.create(other).resource_name == "otherapp.views.Index"


@pytest.mark.unit
def test_create_reads_resources_under_settings_root(factory, write_resource):
    write_resource("controllers/Home.fr.json", {"Title": "Accueil"})
    home = _make_type("myapp.controllers", "Home")

    result = factory.create(home).lookup("Title", culture="fr")

    assert (result.value, result.found) == ("Accueil", True)


@pytest.mark.unit
def test_create_from_base_name_strips_location(factory):
    localizer = factory.create_from_base_name("myapp.Views.Shared", "myapp")

    assert localizer.resource_name == "Views.Shared"


@pytest.mark.unit
def test_create_from_base_name_requires_dot_after_location(factory):
    assert factory.create_from_base_name("myappViews", "myapp").resource_name == "myappViews"


@pytest.mark.unit
def test_localizers_are_cached_per_resource_name(factory):
    home = _make_type("myapp.controllers", "Home")

    by_type = factory.create(home)
    by_name = factory.create_from_base_name("myapp.controllers.Home", "myapp")

    assert by_type is by_name
    assert factory.create(home) is by_type
    assert factory.create_from_base_name("other.Thing", "other") is not by_type


@pytest.mark.unit
def test_localizers_share_one_table_cache(factory):
    first = factory.create_from_base_name("a.One", "a")
    second = factory.create_from_base_name("a.Two", "a")

    assert first._tables is second._tables is factory.table_cache


@pytest.mark.unit
def test_concurrent_create_returns_same_instance(factory):
    barrier = threading.Barrier(16)
    results = []
    lock = threading.Lock()

    def worker():
        barrier.wait(timeout=5)
        localizer = factory.create_from_base_name("myapp.Shared", "myapp")
        with lock:
            results.append(localizer)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert len(results) == 16
    assert all(r is results[0] for r in results)


@pytest.mark.unit
def test_create_argument_validation(factory):
    with pytest.raises(InvalidArgumentError):
        factory.create(None)
    with pytest.raises(InvalidArgumentError):
        factory.create_from_base_name(None, "myapp")
    with pytest.raises(InvalidArgumentError):
        factory.create_from_base_name("myapp.Shared", None)


@pytest.mark.unit
def test_root_namespace_defaults_to_entry_point(tmp_path, monkeypatch):
    monkeypatch.setattr(factory_module, "entry_point_name", lambda: "hostapp")
    factory = JsonStringLocalizerFactory(LocalizationSettings(base_directory=str(tmp_path)))

    assert factory.root_namespace == "hostapp"
    assert factory.create(_make_type("hostapp.pages", "About")).resource_name == "pages.About"


@pytest.mark.unit
def test_entry_point_name_prefers_main_package(monkeypatch):
    main = SimpleNamespace(__spec__=SimpleNamespace(name="hostapp.server"))
    monkeypatch.setitem(sys.modules, "__main__", main)

    assert entry_point_name() == "hostapp"


@pytest.mark.unit
def test_entry_point_name_falls_back_to_script(monkeypatch):
    monkeypatch.setitem(sys.modules, "__main__", SimpleNamespace(__spec__=None))
    monkeypatch.setattr(sys, "argv", ["/srv/hostapp/run.py"])

    assert entry_point_name() == "run"


@pytest.mark.unit
def test_full_type_name_and_trim_prefix():
    nested = _make_type("pkg.mod", "Outer")

    assert full_type_name(nested) == "pkg.mod.Outer"
    assert full_type_name(int) == "int"
    assert trim_prefix("pkg.mod.Outer", "pkg.") == "mod.Outer"
    assert trim_prefix("pkg.mod.Outer", "other.") == "pkg.mod.Outer"
