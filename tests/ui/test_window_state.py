# tests/ui/test_window_state.py
"""
retro_pio_view.ui.window_state / window_utilモジュールの単体テスト。
ウィンドウのライフサイクル（init/discard）と開閉状態の変化検出を検証します。
"""
import pytest

from retro_pio_view.chip.z80pio import Z80PioState
from retro_pio_view.ui.window_state import (
    WindowState, PioWindowDesc, WindowDiscardedError, DEFAULT_WIDTH, DEFAULT_HEIGHT,
)
from retro_pio_view.ui.window_util import handle_window_open_dirty

# @intent:test_suite ウィンドウ状態の契約と変化検出の検証。

class TestWindowStateInit:
    # @intent:test_case_scenario デフォルトサイズでの初期化を検証します。
    def test_init_with_default_size(self):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState(), open=True))
        assert (state.init_w, state.init_h) == (360, 364)
        assert state.open is True
        assert state.last_open is True
        assert state.valid is True

    # @intent:test_case_geometry 幅と高さがそれぞれ独立してデフォルト化されることを検証します。
    @pytest.mark.parametrize("w, h, expected", [
        (0, 0, (DEFAULT_WIDTH, DEFAULT_HEIGHT)),
        (0, 200, (DEFAULT_WIDTH, 200)),
        (500, 0, (500, DEFAULT_HEIGHT)),
        (500, 200, (500, 200)),
    ])
    def test_geometry_defaults(self, w, h, expected):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState(), x=10, y=20, w=w, h=h))
        assert (state.init_w, state.init_h) == expected
        assert (state.init_x, state.init_y) == (10, 20)

    def test_borrows_pio_and_title(self):
        pio = Z80PioState()
        title = "Z80 PIO"
        state = WindowState.from_desc(PioWindowDesc(title=title, pio=pio))
        assert state.pio is pio
        assert state.title is title
        assert state.open is False

    # @intent:test_case_precondition 必須パラメータの欠落が契約違反となることを検証します。
    def test_missing_title(self):
        with pytest.raises(ValueError, match="title"):
            WindowState.from_desc(PioWindowDesc(title=None, pio=Z80PioState()))

    def test_missing_pio(self):
        with pytest.raises(ValueError, match="PIO"):
            WindowState.from_desc(PioWindowDesc(title="PIO", pio=None))

    def test_missing_desc(self):
        with pytest.raises(ValueError):
            WindowState.from_desc(None)


class TestWindowStateDiscard:
    def test_discard(self):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState(), open=True))
        state.discard()
        assert state.valid is False
        # 開閉状態には触れない
        assert state.open is True

    # @intent:test_case_precondition 破棄済みウィンドウの再破棄・使用が契約違反となることを検証します。
    def test_double_discard(self):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState()))
        state.discard()
        with pytest.raises(WindowDiscardedError):
            state.discard()
        with pytest.raises(WindowDiscardedError):
            state.require_valid()


class TestHandleWindowOpenDirty:
    def test_no_change(self):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState(), open=True))
        assert handle_window_open_dirty(state) is False
        assert state.open == state.last_open

    # @intent:test_case_edge 開閉状態の変化が一度だけ検出され、再同期されることを検証します。
    def test_change_detected_once(self):
        state = WindowState.from_desc(PioWindowDesc(title="PIO", pio=Z80PioState(), open=True))
        state.open = False
        assert handle_window_open_dirty(state) is True
        assert state.last_open is False
        assert handle_window_open_dirty(state) is False
