import json

import pytest

from mindnav import config
from mindnav.nav.constants import DEFAULT_OFFSET_WEIGHT


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config, "get_config_path", lambda: path)
    monkeypatch.delenv(config.OFFSET_WEIGHT_ENV, raising=False)
    return path


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


def test_missing_config_uses_default(config_path):
    assert config.load_config() == {}
    assert config.get_offset_weight() == DEFAULT_OFFSET_WEIGHT


def test_malformed_config_is_empty(config_path):
    config_path.write_text("{not json", encoding="utf-8")
    assert config.load_config() == {}


def test_config_file_weight(config_path):
    write_config(config_path, {"offset_weight": 2})
    assert config.get_offset_weight() == 2.0


def test_env_takes_priority(config_path, monkeypatch):
    write_config(config_path, {"offset_weight": 2})
    monkeypatch.setenv(config.OFFSET_WEIGHT_ENV, "0.5")
    assert config.get_offset_weight() == 0.5


def test_invalid_env_falls_back_to_config(config_path, monkeypatch):
    write_config(config_path, {"offset_weight": 3})
    monkeypatch.setenv(config.OFFSET_WEIGHT_ENV, "-1")
    assert config.get_offset_weight() == 3.0


def test_invalid_config_weight_falls_back_to_default(config_path):
    write_config(config_path, {"offset_weight": "lots"})
    assert config.get_offset_weight() == DEFAULT_OFFSET_WEIGHT


def test_set_offset_weight_persists(config_path):
    write_config(config_path, {"hotkeys": {"Focus": "Alt+G"}})
    config.set_offset_weight(1.5)

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved == {"hotkeys": {"Focus": "Alt+G"}, "offset_weight": 1.5}
    assert config.get_offset_weight() == 1.5


def test_set_offset_weight_rejects_negative(config_path):
    with pytest.raises(ValueError):
        config.set_offset_weight(-0.1)
    assert not config_path.exists()


def test_get_hotkeys_filters_unknown_actions(config_path):
    write_config(config_path, {"hotkeys": {"ArrowUp": "Ctrl+K", "Teleport": "Ctrl+T"}})
    assert config.get_hotkeys() == {"ArrowUp": "Ctrl+K"}


def test_get_hotkeys_ignores_non_mapping(config_path):
    write_config(config_path, {"hotkeys": ["Ctrl+K"]})
    assert config.get_hotkeys() == {}


def test_config_path_follows_env(tmp_path, monkeypatch):
    custom = tmp_path / "custom.json"
    monkeypatch.setenv(config.CONFIG_PATH_ENV, str(custom))
    monkeypatch.delenv(config.OFFSET_WEIGHT_ENV, raising=False)
    write_config(custom, {"offset_weight": 4})

    assert config.get_config_path() == custom
    assert config.get_offset_weight() == 4.0


def test_default_config_path_is_project_root(monkeypatch):
    monkeypatch.delenv(config.CONFIG_PATH_ENV, raising=False)
    path = config.get_config_path()
    assert path.name == "config.json"
    assert (path.parent / "mindnav" / "config.py").exists()
