# src/retro_pio_view/ui/main_window.py
"""
メインウィンドウの実装。
PIOデバッグウィンドウ群を保持し、フレームタイマーによる描画と設定の保存を管理します。
"""
import logging
from typing import List, Optional

from PySide6.QtWidgets import QMainWindow, QLabel
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtCore import Qt, QTimer, Slot

from retro_pio_view.chip.z80pio import Z80PioState
from retro_pio_view.config.models import PanelConfig
from retro_pio_view.settings.store import UiSettings
from .pio_window import PioWindow
from .window_state import PioWindowDesc

logger = logging.getLogger(__name__)


# @intent:responsibility デバッグウィンドウ群の生成、フレーム描画、設定の永続化を統括します。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    "Hardware"メニューから各PIOウィンドウの開閉を切り替えます。
    """
    # @intent:responsibility 構成に従ってPIOウィンドウを生成し、保存済み設定を復元します。
    def __init__(self, config: PanelConfig, pios: Optional[List[Z80PioState]] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Retro PIO View")
        self.setGeometry(100, 100, 320, 120)

        self._config = config
        self.settings = UiSettings()
        self.settings.load_file(config.settings_path)

        # チップ状態はエミュレータ側が所有する。未指定時はリセット直後の状態を表示する
        self.pios = pios if pios is not None else [Z80PioState() for _ in config.windows]
        if len(self.pios) != len(config.windows):
            raise ValueError("Number of PIO states must match the number of configured windows.")

        self.pio_windows: List[PioWindow] = []
        self._window_actions: List[QAction] = []
        hardware_menu = self.menuBar().addMenu("Hardware")
        for window_config, pio in zip(config.windows, self.pios):
            desc = PioWindowDesc(
                title=window_config.title,
                pio=pio,
                x=window_config.x,
                y=window_config.y,
                w=window_config.w,
                h=window_config.h,
                open=window_config.open,
            )
            win = PioWindow(desc, self)
            if window_config.title in self.settings:
                win.load_settings(self.settings)
            win.settings_dirty.connect(self._on_settings_dirty)
            self.pio_windows.append(win)

            action = QAction(window_config.title, self)
            action.setCheckable(True)
            action.setChecked(win.is_open)
            action.toggled.connect(win.set_open)
            hardware_menu.addAction(action)
            self._window_actions.append(action)

        self.status_label = QLabel("Select windows from the Hardware menu", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.setCentralWidget(self.status_label)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self.draw_frame)
        self._timer.start(config.frame_interval_ms)

    # @intent:responsibility 全てのPIOウィンドウを1フレーム分描画し、メニューの表示を同期します。
    @Slot()
    def draw_frame(self):
        for win, action in zip(self.pio_windows, self._window_actions):
            win.draw()
            if action.isChecked() != win.is_open:
                action.blockSignals(True)
                action.setChecked(win.is_open)
                action.blockSignals(False)

    @Slot(str)
    def _on_settings_dirty(self, title: str):
        logger.debug("Settings dirty for window '%s'", title)
        self.save_settings()

    # @intent:responsibility 全ウィンドウの開閉状態を設定ファイルへ書き出します。
    def save_settings(self):
        for win in self.pio_windows:
            if win.state.valid:
                win.save_settings(self.settings)
        self.settings.save_file(self._config.settings_path)

    # @intent:responsibility 終了時に設定を保存し、全ウィンドウを破棄します。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        self.save_settings()
        for win in self.pio_windows:
            if win.state.valid:
                win.discard()
        for action in self._window_actions:
            action.setEnabled(False)
        event.accept()
