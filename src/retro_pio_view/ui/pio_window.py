# src/retro_pio_view/ui/pio_window.py
"""
Z80 PIO デバッグウィンドウ。

ウィンドウ状態、ピン配置図、ポートテーブルを組み合わせ、
フレームごとにチップ状態を読み取って表示を更新します。
"""
import logging

from PySide6.QtWidgets import QWidget, QHBoxLayout
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QCloseEvent

from retro_pio_view.settings import bridge
from retro_pio_view.settings.store import SettingsStore
from retro_pio_view.ui.chip_view import ChipView
from retro_pio_view.ui.port_table import build_port_table
from retro_pio_view.ui.port_table_view import PortTableView
from retro_pio_view.ui.window_state import WindowState, PioWindowDesc
from retro_pio_view.ui.window_util import handle_window_open_dirty

logger = logging.getLogger(__name__)

# @intent:constant ピン配置図の領域幅。
CHIP_PANE_WIDTH = 176


# @intent:responsibility Z80 PIOの内部状態を表示するデバッグウィンドウを提供します。
class PioWindow(QWidget):
    """
    Z80 PIOのデバッグウィンドウ。
    draw()をフレームごとに呼び出すことで、借用したチップ状態を表示に反映します。
    チップ状態は読み取るだけで、変更しません。
    """
    # 開閉状態が変化し、永続化された設定の更新が必要になったことを通知する
    settings_dirty = Signal(str)

    # @intent:responsibility ウィンドウ状態とサブウィジェットを初期化します（init）。
    # @intent:pre-condition desc.titleとdesc.pioはNoneであってはなりません。
    def __init__(self, desc: PioWindowDesc, parent=None):
        super().__init__(parent, Qt.Window)
        self._state = WindowState.from_desc(desc)
        self._geometry_applied = False

        self.setWindowTitle(self._state.title)
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")

        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)

        self.chip_view = ChipView(desc.chip_desc)
        self.chip_view.setFixedWidth(CHIP_PANE_WIDTH)
        self.layout.addWidget(self.chip_view)

        self.port_table_view = PortTableView()
        self.layout.addWidget(self.port_table_view, 1)

    @property
    def state(self) -> WindowState:
        return self._state

    @property
    def title(self) -> str:
        return self._state.title

    @property
    def is_open(self) -> bool:
        return self._state.open

    # @intent:responsibility ユーザー操作（メニュー等）による開閉要求を受け付けます。
    # @intent:rationale 表示への反映は次のdraw()で行われます。
    def set_open(self, is_open: bool) -> None:
        self._state.require_valid()
        self._state.open = is_open

    # @intent:responsibility ウィンドウを破棄します（discard）。
    def discard(self) -> None:
        self._state.discard()
        self.hide()

    # @intent:responsibility 1フレーム分の描画を行います。
    # @intent:pre-condition ウィンドウは有効（破棄前）である必要があります。
    def draw(self) -> None:
        self._state.require_valid()
        if handle_window_open_dirty(self._state):
            logger.debug("Window '%s' open state changed to %s", self._state.title, self._state.open)
            self.settings_dirty.emit(self._state.title)
        if not self._state.open:
            if self.isVisible():
                self.hide()
            return

        if not self._geometry_applied:
            # 初回表示時のみ初期位置・サイズを適用する
            self.setGeometry(int(self._state.init_x), int(self._state.init_y),
                             int(self._state.init_w), int(self._state.init_h))
            self._geometry_applied = True
        if not self.isVisible():
            self.show()

        self.chip_view.draw(self._state.pio.pins)
        self.port_table_view.draw(build_port_table(self._state.pio))

    # @intent:responsibility 開閉状態を設定ストアへ保存します。
    def save_settings(self, settings: SettingsStore) -> None:
        bridge.save_settings(self._state, settings)

    # @intent:responsibility 設定ストアから開閉状態を復元します。
    def load_settings(self, settings: SettingsStore) -> None:
        bridge.load_settings(self._state, settings)

    # @intent:responsibility ウィンドウ自身のクローズ操作を開閉状態に反映します。
    def closeEvent(self, event: QCloseEvent):
        if self._state.valid:
            self._state.open = False
        event.accept()
