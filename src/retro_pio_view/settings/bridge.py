# src/retro_pio_view/settings/bridge.py
"""
ウィンドウ状態と設定ストアの橋渡し。

ウィンドウの開閉状態を、タイトルをキーとして設定ストアへ書き込み・読み出します。
"""
import logging

from retro_pio_view.settings.store import SettingsStore
from retro_pio_view.ui.window_state import WindowState

logger = logging.getLogger(__name__)


# @intent:responsibility ウィンドウの開閉状態を設定ストアへ書き込みます。
# @intent:pre-condition ウィンドウは有効（破棄前）であり、sinkはNoneであってはなりません。
def save_settings(state: WindowState, sink: SettingsStore) -> None:
    state.require_valid()
    if sink is None:
        raise ValueError("Settings sink is required.")
    sink.set_open(state.title, state.open)
    logger.debug("Saved window '%s' open=%s", state.title, state.open)


# @intent:responsibility 設定ストアから開閉状態を読み出し、ウィンドウに反映します。
# @intent:rationale 未登録時の値はストアの契約に従い、ここでは補完しません。
def load_settings(state: WindowState, source: SettingsStore) -> None:
    state.require_valid()
    if source is None:
        raise ValueError("Settings source is required.")
    state.open = source.is_open(state.title)
    logger.debug("Loaded window '%s' open=%s", state.title, state.open)
