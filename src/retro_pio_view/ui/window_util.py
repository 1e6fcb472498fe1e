# src/retro_pio_view/ui/window_util.py
"""
ウィンドウ管理の補助関数。
"""
from retro_pio_view.ui.window_state import WindowState


# @intent:responsibility open/last_open の変化を検出し、両者を再同期します。
# @intent:post-condition 呼び出し後は常に open == last_open となります。
def handle_window_open_dirty(state: WindowState) -> bool:
    """
    前フレームから開閉状態が変化していれば、last_openを更新してTrueを返します。
    Trueは永続化された設定の更新が必要であることを意味します。
    """
    if state.open != state.last_open:
        state.last_open = state.open
        return True
    return False
