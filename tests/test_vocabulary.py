"""Unit tests for vocabulary files, the settings store, and precedence.

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
"""

import json
import logging

import pytest

from swear_killer.vocabulary import (
    DEFAULT_SWEAR_WORDS,
    Settings,
    SettingsStore,
    load_vocabulary_file,
    resolve_vocabulary,
)


class TestLoadVocabularyFile:

    def test_one_term_per_line(self, tmp_path):
        path = tmp_path / "swears.txt"
        path.write_text("fuck\nshit\nmother fucker\n", encoding="utf-8")
        assert load_vocabulary_file(path) == ["fuck", "shit", "mother fucker"]

    def test_strips_and_skips_blank_and_comment_lines(self, tmp_path):
        path = tmp_path / "swears.txt"
        path.write_text("  fuck  \n\n# comment\n   \n\tshit\n", encoding="utf-8")
        assert load_vocabulary_file(path) == ["fuck", "shit"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "swears.txt"
        path.write_text("", encoding="utf-8")
        assert load_vocabulary_file(path) == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            load_vocabulary_file(tmp_path / "missing.txt")


class TestSettingsStore:

    def test_round_trip(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")
        store.save(["fuck", "shit"])
        assert store.load() == ["fuck", "shit"]

    def test_file_format(self, tmp_path):
        path = tmp_path / "settings.json"
        SettingsStore(path).save(["fuck"])
        assert json.loads(path.read_text(encoding="utf-8")) == {"swear_words": ["fuck"]}
        assert '\n  "swear_words"' in path.read_text(encoding="utf-8")

    def test_missing_file_returns_none(self, tmp_path):
        assert SettingsStore(tmp_path / "nope.json").load() is None

    def test_invalid_json_returns_none_and_warns(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="swear_killer.vocabulary"):
            assert SettingsStore(path).load() is None
        assert any("Ignoring invalid settings" in r.getMessage() for r in caplog.records)

    def test_wrong_shape_returns_none(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"swear_words": "fuck"}', encoding="utf-8")
        assert SettingsStore(path).load() is None

    def test_empty_list_returns_none(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"swear_words": []}', encoding="utf-8")
        assert SettingsStore(path).load() is None

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"swear_words": ["shit"], "theme": "dark"}', encoding="utf-8")
        assert SettingsStore(path).load() == ["shit"]

    def test_settings_model_default(self):
        assert Settings().swear_words == []


class TestResolveVocabulary:

    def test_defaults_when_nothing_given(self):
        assert resolve_vocabulary() == list(DEFAULT_SWEAR_WORDS)

    def test_defaults_when_settings_missing(self, tmp_path):
        store = SettingsStore(tmp_path / "none.json")
        assert resolve_vocabulary(store=store) == list(DEFAULT_SWEAR_WORDS)

    def test_saved_settings_override_defaults(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")
        store.save(["heck"])
        assert resolve_vocabulary(store=store) == ["heck"]

    def test_file_overrides_settings(self, tmp_path):
        store = SettingsStore(tmp_path / "settings.json")
        store.save(["heck"])
        words = tmp_path / "words.txt"
        words.write_text("darn\n", encoding="utf-8")
        assert resolve_vocabulary(words, store) == ["darn"]

    def test_returns_a_fresh_list(self):
        first = resolve_vocabulary()
        first.append("extra")
        assert "extra" not in resolve_vocabulary()

    def test_default_list_contents(self):
        assert len(DEFAULT_SWEAR_WORDS) == 18
        assert "mother fucker" in DEFAULT_SWEAR_WORDS
        assert "jesus christ" in DEFAULT_SWEAR_WORDS
