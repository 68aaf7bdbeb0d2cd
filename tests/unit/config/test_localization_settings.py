from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from json_localization.config import settings as settings_module
from json_localization.config.settings import LocalizationSettings, get_settings, reload_settings
from json_localization.utils import culture as culture_module


@pytest.mark.unit
def test_defaults():
    settings = LocalizationSettings()

    assert settings.resources_path == "Resources"
    assert settings.root_namespace is None
    assert settings.default_culture is None
    assert settings.resources_root() == Path.cwd() / "Resources"


@pytest.mark.unit
def test_environment_binding(monkeypatch, tmp_path):
    monkeypatch.setenv("JSON_LOCALIZATION_RESOURCES_PATH", "Strings")
    monkeypatch.setenv("JSON_LOCALIZATION_ROOT_NAMESPACE", "shop")
    monkeypatch.setenv("JSON_LOCALIZATION_BASE_DIRECTORY", str(tmp_path))
    monkeypatch.setenv("JSON_LOCALIZATION_DEFAULT_CULTURE", "pt_br")

    settings = LocalizationSettings()

    assert settings.root_namespace == "shop"
    assert settings.default_culture == "pt-BR"
    assert settings.resources_root() == tmp_path / "Strings"


@pytest.mark.unit
def test_blank_resources_path_resolves_to_default(tmp_path):
    settings = LocalizationSettings(base_directory=str(tmp_path), resources_path="")

    assert settings.resources_root() == tmp_path / "Resources"


@pytest.mark.unit
def test_absolute_resources_path(tmp_path):
    settings = LocalizationSettings(base_directory="/unused", resources_path=str(tmp_path))

    assert settings.resources_root() == tmp_path


@pytest.mark.unit
def test_invalid_default_culture_is_rejected():
    with pytest.raises(ValidationError):
        LocalizationSettings(default_culture="not a culture")


@pytest.mark.unit
def test_effective_default_culture(monkeypatch):
    monkeypatch.setattr(culture_module.locale, "getlocale", lambda: ("sv_SE", "UTF-8"))

    assert LocalizationSettings(default_culture="fi").effective_default_culture() == "fi"
    assert LocalizationSettings().effective_default_culture() == "sv-SE"


@pytest.mark.unit
def test_reload_settings(monkeypatch):
    original = get_settings()
    monkeypatch.setenv("JSON_LOCALIZATION_ROOT_NAMESPACE", "reloaded")
    try:
        reloaded = reload_settings()
        assert reloaded is get_settings()
        assert reloaded.root_namespace == "reloaded"
    finally:
        monkeypatch.setattr(settings_module, "settings", original)


@pytest.mark.unit
def test_env_file_in_working_directory(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("JSON_LOCALIZATION_ROOT_NAMESPACE=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert LocalizationSettings().root_namespace == "from-dotenv"
