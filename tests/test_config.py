from pathlib import Path

from core.config import ConfigLoader
from core.version import versions


def test_defaults_without_settings_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("RITUALMAP_DATA_DIR", raising=False)
    monkeypatch.delenv("RITUALMAP_LOCALE", raising=False)
    cfg = ConfigLoader(tmp_path / "missing.ini")
    assert cfg.locale() == "en"
    assert cfg.suggestion_limit() == 20
    assert cfg.easter_egg_sound() == "/timestop.mp3"
    assert cfg.easter_egg_volume() == 0.35
    assert cfg.data_dir() == cfg.project_root / "data" / "catalog"


def test_settings_file_and_env_overrides(tmp_path, monkeypatch) -> None:
    ini = tmp_path / "settings.ini"
    ini.write_text(
        "[PATHS]\nDATA_DIR = ~/ritual-data\n"
        "[SEARCH]\nLOCALE = ja\nSUGGESTION_LIMIT = oops\n"
        "[EASTER_EGG]\nVOLUME = 0.8\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("RITUALMAP_DATA_DIR", raising=False)
    monkeypatch.delenv("RITUALMAP_LOCALE", raising=False)
    cfg = ConfigLoader(ini)
    assert cfg.locale() == "ja"
    assert cfg.suggestion_limit() == 20
    assert cfg.easter_egg_volume() == 0.8
    assert cfg.data_dir() == Path.home() / "ritual-data"

    monkeypatch.setenv("RITUALMAP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RITUALMAP_LOCALE", "fr")
    assert cfg.data_dir() == tmp_path
    assert cfg.locale() == "fr"


def test_versions() -> None:
    ver = versions()
    assert set(ver) == {"project_version", "data_version"}
    assert ver["project_version"] != "unknown"
