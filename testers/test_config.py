# -*- coding: utf-8 -*-
import json
import logging

from simple_math.utils.config import Config, DEFAULT_CONFIG


def test_defaults_without_file(config):
    assert config.epsilon == DEFAULT_CONFIG["vector"]["epsilon"]
    assert config.legacy_flat_array is False
    assert not config.path.exists()


def test_singleton(config):
    assert Config() is config


def test_load_merges_with_defaults(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"matrix": {"legacy_flat_array": True}}), encoding="utf-8")
    Config.reset()
    cfg = Config(str(path))
    assert cfg.legacy_flat_array is True
    assert cfg.epsilon == DEFAULT_CONFIG["vector"]["epsilon"]


def test_broken_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    Config.reset()
    with caplog.at_level(logging.ERROR, logger="SimpleMath"):
        cfg = Config(str(path))
    assert cfg.data == DEFAULT_CONFIG
    assert "Failed to read config" in caplog.text


def test_save_writes_json(config):
    config["vector"] = {"epsilon": 0.5}
    config.save()
    saved = json.loads(config.path.read_text(encoding="utf-8"))
    assert saved["vector"]["epsilon"] == 0.5
    Config.reset()
    assert Config(str(config.path)).epsilon == 0.5


def test_get_with_default(config):
    assert config.get("missing", 3) == 3
    assert config["missing"] is None
