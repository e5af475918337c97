# src/e2e/test_config_settings.py
import json

import pytest

from notehint.models import SearchConfiguration, load_settings


def test_defaults():
    cfg = SearchConfiguration()
    assert cfg.prefix_separator == " "
    assert cfg.prefix_tokens == ()
    assert cfg.fuzzy_matching is True
    assert (cfg.min_query_length, cfg.debounce_ms, cfg.result_limit) == (2, 200, 3)
    assert cfg.enabled is True


def test_plugin_settings_keys():
    cfg = SearchConfiguration.from_settings({
        "realPrefixSeparator": "/",
        "prefixedFolders": [{"folder": "Plugins", "prefix": "插件"}, {"folder": "Work", "prefix": "w"}],
        "showExistingNotesHint": False,
        "existingNotesLimit": 5,
    })
    assert cfg.prefix_separator == "/"
    assert cfg.prefix_tokens == ("插件", "w")
    assert cfg.enabled is False
    assert cfg.result_limit == 5


def test_falsy_values_take_defaults():
    cfg = SearchConfiguration.from_settings({
        "prefix_separator": "",
        "existingNotesLimit": 0,
        "debounce_ms": None,
    })
    assert cfg.prefix_separator == " "
    assert cfg.result_limit == 3
    assert cfg.debounce_ms == 200


def test_negative_numbers_clamped_to_zero():
    cfg = SearchConfiguration.from_settings({"debounce_ms": -10, "result_limit": -2, "min_query_length": -1})
    assert (cfg.debounce_ms, cfg.result_limit, cfg.min_query_length) == (0, 0, 0)


def test_prefixed_folder_without_prefix_is_skipped():
    cfg = SearchConfiguration.from_settings({"prefixedFolders": [{"folder": "x"}, {"prefix": "p"}]})
    assert cfg.prefix_tokens == ("p",)


def test_load_settings_from_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"prefixedFolders": [{"prefix": "插件"}], "enableFuzzyMatching": False}),
                    encoding="utf-8")
    cfg = load_settings(path)
    assert cfg.prefix_tokens == ("插件",)
    assert cfg.fuzzy_matching is False


def test_load_settings_rejects_non_object(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(path)
