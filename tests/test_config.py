import json
import os

from passcraft.alphabet import CharacterClass, GenerationOptions
from passcraft.config import (
    DEFAULTS,
    config_from_options,
    config_path,
    load_config,
    options_from_config,
    save_config,
)


def test_defaults_when_missing(passcraft_home):
    assert load_config() == DEFAULTS
    assert config_path() == os.path.join(str(passcraft_home), "config.json")


def test_merges_over_defaults(passcraft_home):
    with open(config_path(), "w", encoding="utf-8") as f:
        json.dump({"length": 24, "symbols": False, "theme": "dark"}, f)
    cfg = load_config()
    assert cfg["length"] == 24
    assert cfg["symbols"] is False
    assert cfg["uppercase"] is True
    assert "theme" not in cfg


def test_corrupt_file_falls_back(passcraft_home):
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("[1, 2")
    assert load_config() == DEFAULTS
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("[1, 2]")
    assert load_config() == DEFAULTS


def test_round_trip(passcraft_home):
    opts = GenerationOptions(
        classes=frozenset([CharacterClass.LOWERCASE, CharacterClass.NUMBERS]),
        length=10,
        exclude_ambiguous=True,
    )
    save_config(config_from_options(opts))
    assert options_from_config(load_config()) == opts


def test_default_options():
    assert options_from_config(DEFAULTS) == GenerationOptions()


def test_config_from_options_keeps_other_keys():
    cfg = config_from_options(GenerationOptions(), {**DEFAULTS, "history_enabled": False})
    assert cfg["history_enabled"] is False


def test_all_classes_off_is_kept_as_is():
    cfg = {**DEFAULTS, "uppercase": False, "lowercase": False, "numbers": False, "symbols": False}
    assert options_from_config(cfg).classes == frozenset()


def test_values_of_the_wrong_type_use_defaults(passcraft_home):
    with open(config_path(), "w", encoding="utf-8") as f:
        json.dump({
            "exclude_similar": "yes",
            "history_enabled": "false",
            "symbols": 0,
            "length": "20",
            "lowercase": False,
        }, f)
    cfg = load_config()
    assert cfg["exclude_similar"] is False
    assert cfg["history_enabled"] is True
    assert cfg["symbols"] is True
    assert cfg["length"] == 16
    assert cfg["lowercase"] is False


def test_only_real_booleans_select_classes():
    cfg = {**DEFAULTS, "uppercase": "false", "lowercase": 1, "exclude_similar": "true"}
    opts = options_from_config(cfg)
    assert CharacterClass.UPPERCASE not in opts.classes
    assert CharacterClass.LOWERCASE not in opts.classes
    assert opts.exclude_similar is False
