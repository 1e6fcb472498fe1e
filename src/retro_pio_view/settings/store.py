# src/retro_pio_view/settings/store.py
"""
ウィンドウ設定の永続化ストア。

ウィンドウタイトルをキーとして、開閉状態（bool）を保持します。
UiSettingsはメモリ上に保持し、YAMLファイルとの読み書きを行います。
"""
from abc import ABC, abstractmethod
from typing import Dict, List
import logging
import os

import yaml

logger = logging.getLogger(__name__)

# @intent:constant ストアが保持できるウィンドウ数の上限。
MAX_SLOTS = 32


# @intent:responsibility 設定ストアの抽象インターフェースを定義します。
class SettingsStore(ABC):
    """
    ウィンドウタイトル → 開閉状態 の対応を保持するストアの抽象基底クラス。
    任意の永続化バックエンドに差し替えられるよう、読み書きの2操作のみを定義します。
    """
    @abstractmethod
    def is_open(self, title: str) -> bool:
        """
        指定タイトルの開閉状態を返します。未登録時の扱いは実装に委ねられます。
        """
        pass

    @abstractmethod
    def set_open(self, title: str, is_open: bool) -> bool:
        """
        指定タイトルの開閉状態を書き込みます。既存のエントリは上書きされます。
        書き込めなかった場合はFalseを返します。
        """
        pass


# @intent:responsibility メモリ上の設定ストアと、そのYAMLファイルへの永続化を提供します。
class UiSettings(SettingsStore):
    """
    最大MAX_SLOTS件のウィンドウ設定を保持するストア。
    未登録のタイトルに対するis_openはFalseを返します。
    """
    def __init__(self, max_slots: int = MAX_SLOTS):
        if not isinstance(max_slots, int) or max_slots <= 0:
            raise ValueError("max_slots must be a positive integer.")
        self._max_slots = max_slots
        self._slots: Dict[str, bool] = {}

    def is_open(self, title: str) -> bool:
        return self._slots.get(title, False)

    def set_open(self, title: str, is_open: bool) -> bool:
        if title not in self._slots and len(self._slots) >= self._max_slots:
            logger.warning("Settings store full (%d slots), dropping entry for '%s'", self._max_slots, title)
            return False
        self._slots[title] = bool(is_open)
        return True

    def titles(self) -> List[str]:
        return list(self._slots.keys())

    def clear(self) -> None:
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, title: str) -> bool:
        return title in self._slots

    # @intent:responsibility YAMLファイルから設定を読み込みます。
    # @intent:rationale 初回起動時はファイルが存在しないため、空のストアとして扱います。
    def load_file(self, path: str) -> None:
        self.clear()
        if not os.path.exists(path):
            logger.debug("Settings file %s not found, starting with empty settings", path)
            return
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid settings file {path}: {e}") from e
        self._parse_settings(data)
        logger.debug("Loaded %d window settings from %s", len(self._slots), path)

    def _parse_settings(self, data) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings format: expected a mapping, got {type(data).__name__}")
        windows = data.get("windows") or {}
        if not isinstance(windows, dict):
            raise ValueError("Invalid settings format: 'windows' must be a mapping")
        for title, entry in windows.items():
            if not isinstance(entry, dict) or not isinstance(entry.get("open"), bool):
                raise ValueError(f"Invalid settings entry for window '{title}': {entry}")
            self.set_open(str(title), entry["open"])

    # @intent:responsibility 現在の設定をYAMLファイルへ書き出します。
    def save_file(self, path: str) -> None:
        data = {"windows": {title: {"open": is_open} for title, is_open in self._slots.items()}}
        with open(path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.debug("Saved %d window settings to %s", len(self._slots), path)
