# tests/settings/test_store.py
"""
retro_pio_view.settings.storeモジュールの単体テスト。
"""
import logging

import pytest
import yaml

from retro_pio_view.settings.store import UiSettings, SettingsStore, MAX_SLOTS

# @intent:test_suite ウィンドウ設定ストアの読み書きとYAML永続化の検証。

class TestUiSettings:
    def test_is_settings_store(self):
        assert isinstance(UiSettings(), SettingsStore)

    # @intent:test_case_miss 未登録タイトルはFalseとして扱われることを検証します。
    def test_lookup_miss(self):
        settings = UiSettings()
        assert settings.is_open("Z80 PIO") is False
        assert len(settings) == 0

    # @intent:test_case_overwrite 同じタイトルへの書き込みが上書きとなることを検証します。
    def test_overwrite(self):
        settings = UiSettings()
        assert settings.set_open("Z80 PIO", True)
        assert settings.set_open("Z80 PIO", False)
        assert settings.is_open("Z80 PIO") is False
        assert len(settings) == 1

    # @intent:test_case_capacity 上限を超えた新規タイトルは破棄されることを検証します。
    def test_capacity(self, caplog):
        settings = UiSettings(max_slots=2)
        assert settings.set_open("A", True)
        assert settings.set_open("B", True)
        with caplog.at_level(logging.WARNING, logger="retro_pio_view.settings.store"):
            assert settings.set_open("C", True) is False
        assert "C" not in settings
        assert "dropping entry" in caplog.text
        # 既存タイトルの上書きは可能
        assert settings.set_open("A", False)
        assert settings.is_open("A") is False

    def test_default_capacity(self):
        settings = UiSettings()
        for i in range(MAX_SLOTS):
            assert settings.set_open(f"win{i}", True)
        assert settings.set_open("overflow", True) is False

    def test_invalid_capacity(self):
        with pytest.raises(ValueError, match="max_slots must be a positive integer."):
            UiSettings(max_slots=0)


class TestUiSettingsFile:
    # @intent:test_case_roundtrip YAMLファイルへの保存と読み込みで状態が保たれることを検証します。
    def test_save_and_load(self, tmp_path):
        path = str(tmp_path / "settings.yaml")
        settings = UiSettings()
        settings.set_open("Z80 PIO", True)
        settings.set_open("Z80 PIO 2", False)
        settings.save_file(path)

        with open(path) as f:
            data = yaml.safe_load(f)
        assert data == {"windows": {"Z80 PIO": {"open": True}, "Z80 PIO 2": {"open": False}}}

        loaded = UiSettings()
        loaded.load_file(path)
        assert loaded.titles() == ["Z80 PIO", "Z80 PIO 2"]
        assert loaded.is_open("Z80 PIO") is True
        assert loaded.is_open("Z80 PIO 2") is False

    def test_missing_file(self, tmp_path):
        settings = UiSettings()
        settings.set_open("stale", True)
        settings.load_file(str(tmp_path / "missing.yaml"))
        assert len(settings) == 0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        settings = UiSettings()
        settings.load_file(str(path))
        assert len(settings) == 0

    # @intent:test_case_malformed 不正な内容の設定ファイルはValueErrorとなることを検証します。
    @pytest.mark.parametrize("content", [
        "- a\n- b\n",
        "windows: [1, 2]\n",
        "windows:\n  PIO: {open: maybe}\n",
        "windows:\n  PIO: true\n",
    ])
    def test_malformed_file(self, tmp_path, content):
        path = tmp_path / "bad.yaml"
        path.write_text(content)
        with pytest.raises(ValueError):
            UiSettings().load_file(str(path))

    # @intent:test_case_corrupted YAMLとして解析できない設定ファイルもValueErrorとなることを検証します。
    def test_corrupted_yaml(self, tmp_path):
        path = tmp_path / "corrupted.yaml"
        path.write_text("windows: {PIO: [unclosed\n")
        settings = UiSettings()
        with pytest.raises(ValueError, match="Invalid settings file"):
            settings.load_file(str(path))
        assert len(settings) == 0
