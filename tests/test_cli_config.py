import json
from dataclasses import replace
from pathlib import Path

from runeclicker.domain.config import DEFAULT_CONFIG
from runeclicker.presentation.cli import config as cli_config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert cli_config.load_config(tmp_path / "missing.json") is DEFAULT_CONFIG


def test_saved_overrides_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    cli_config.save_config(replace(DEFAULT_CONFIG, spawn_interval=1500, auto_attack=False), path)

    loaded = cli_config.load_config(path)

    assert loaded.spawn_interval == 1500
    assert loaded.auto_attack is False
    assert loaded.player_max_hp == DEFAULT_CONFIG.player_max_hp


def test_unreadable_config_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{ broken", encoding="utf-8")

    assert cli_config.load_config(path) is DEFAULT_CONFIG


def test_bad_values_fall_back_per_field(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"enemy_base_hp": "lots", "attack_speed": 2, "auto_attack": 1, "unknown": 5}),
        encoding="utf-8",
    )

    loaded = cli_config.load_config(path)

    assert loaded.enemy_base_hp == DEFAULT_CONFIG.enemy_base_hp
    assert loaded.attack_speed == 2.0
    assert loaded.auto_attack is DEFAULT_CONFIG.auto_attack


def test_default_config_path_under_user_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(cli_config, "get_user_data_dir", lambda: tmp_path)
    assert cli_config.get_default_config_path() == tmp_path / "config.json"
