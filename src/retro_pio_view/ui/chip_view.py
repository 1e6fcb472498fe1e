# src/retro_pio_view/ui/chip_view.py
"""
Chip View モジュール。

チップの外形とピンを描画し、64bitピンマスクに基づいて各ピンのアクティブ状態を色で示します。
"""
from typing import Dict, List, Tuple

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsRectItem
from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter, QColor, QPen, QBrush

from retro_pio_view.common.types import ChipDesc, PinInfo
from retro_pio_view.ui.fonts import get_monospace_font

# --- 色定義 ---
COLOR_BG = "#1E1E1E"
COLOR_CHIP = "#00AAAA"
COLOR_CHIP_BODY = "#252525"
COLOR_PIN_OFF = "#444444"
COLOR_PIN_ON = "#FFD700"
COLOR_LABEL = "#BBBBBB"

# --- レイアウト定数 ---
CHIP_WIDTH = 64
PIN_WIDTH = 16
PIN_HEIGHT = 10
PIN_SPACING = 14
LABEL_MARGIN = 4

# @intent:responsibility チップのピン配置図を描画し、ピン状態に応じて色を更新します。
class ChipView(QGraphicsView):
    """
    ChipDescで定義されたピン配置を持つチップを描画するビュー。
    左側にスロット 0..n/2-1、右側にスロット n/2..n-1 を上から順に配置します。
    """
    def __init__(self, desc: ChipDesc, parent=None):
        super().__init__(parent)
        self.scene = QGraphicsScene(self)
        self.setScene(self.scene)
        self.setRenderHint(QPainter.Antialiasing)
        self.setBackgroundBrush(QBrush(QColor(COLOR_BG)))
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        self._desc = desc
        self._pin_items: List[Tuple[PinInfo, QGraphicsRectItem]] = []
        self._pin_states: Dict[str, bool] = {}
        self._setup_static_scene()

    @property
    def desc(self) -> ChipDesc:
        return self._desc

    def _slot_pos(self, slot: int) -> Tuple[float, float, bool]:
        half = (self._desc.num_slots + 1) // 2
        is_left = slot < half
        row = slot if is_left else slot - half
        y = PIN_SPACING + row * PIN_SPACING
        x = 0.0 if is_left else float(PIN_WIDTH + CHIP_WIDTH)
        return x, y, is_left

    def _setup_static_scene(self):
        self.scene.clear()
        self._pin_items.clear()
        font_title = get_monospace_font(9, bold=True)
        font_small = get_monospace_font(7)

        half = (self._desc.num_slots + 1) // 2
        body_h = (half + 1) * PIN_SPACING
        self.scene.addRect(PIN_WIDTH, 0, CHIP_WIDTH, body_h, QPen(QColor(COLOR_CHIP), 2), QBrush(QColor(COLOR_CHIP_BODY)))
        title = self.scene.addSimpleText(self._desc.name, font_title)
        title.setBrush(QBrush(QColor(COLOR_CHIP)))
        title.setPos(PIN_WIDTH + (CHIP_WIDTH - title.boundingRect().width()) / 2, body_h / 2 - title.boundingRect().height() / 2)

        for pin in self._desc.pins:
            x, y, is_left = self._slot_pos(pin.slot)
            rect = self.scene.addRect(x, y, PIN_WIDTH, PIN_HEIGHT, QPen(Qt.NoPen), QBrush(QColor(COLOR_PIN_OFF)))
            self._pin_items.append((pin, rect))
            self._pin_states[pin.name] = False

            label = self.scene.addSimpleText(pin.name, font_small)
            label.setBrush(QBrush(QColor(COLOR_LABEL)))
            # ピン名はチップ本体の内側に表示する
            if is_left:
                label.setPos(PIN_WIDTH + LABEL_MARGIN, y - 1)
            else:
                label.setPos(PIN_WIDTH + CHIP_WIDTH - label.boundingRect().width() - LABEL_MARGIN, y - 1)

    # @intent:responsibility ピンマスクに基づいて各ピンの表示色を更新します。
    def draw(self, pins: int) -> None:
        for pin, rect in self._pin_items:
            active = (pins & pin.mask) != 0
            if self._pin_states[pin.name] != active:
                rect.setBrush(QBrush(QColor(COLOR_PIN_ON if active else COLOR_PIN_OFF)))
                self._pin_states[pin.name] = active

    # @intent:accessor 現在表示中の各ピンのアクティブ状態を返します。
    def pin_states(self) -> Dict[str, bool]:
        return dict(self._pin_states)
