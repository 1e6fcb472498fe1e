# src/retro_pio_view/ui/port_table_view.py
"""
ポートテーブルを描画するウィジェット。
build_port_tableが生成したマトリクスを、読み取り専用のQTableWidgetに流し込みます。
"""
from typing import Optional
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QHeaderView

from retro_pio_view.ui.fonts import get_monospace_font
from retro_pio_view.ui.port_table import PortTable, HEADER, COLUMN_WIDTHS, ROW_LABELS

# @intent:responsibility ポートテーブルを表形式で表示します。
class PortTableView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget(len(ROW_LABELS), len(HEADER))
        self.table.setHorizontalHeaderLabels(list(HEADER))
        header = self.table.horizontalHeader()
        for col, width in enumerate(COLUMN_WIDTHS):
            header.setSectionResizeMode(col, QHeaderView.Fixed)
            self.table.setColumnWidth(col, width)

        self.table.setFont(get_monospace_font(9))
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionMode(QTableWidget.NoSelection)
        self.table.setStyleSheet("QTableWidget { background-color: #121212; color: #BBBBBB; gridline-color: #303030; } QHeaderView::section { background-color: #252525; color: #BBBBBB; }")

        self.layout.addWidget(self.table)
        self._last_table: Optional[PortTable] = None

    # @intent:responsibility 与えられたポートテーブルの内容でセルを更新します。
    def draw(self, port_table: PortTable) -> None:
        self.table.setRowCount(len(port_table.rows))
        for row, entry in enumerate(port_table.rows):
            self._set_cell(row, 0, entry.label)
            for col, value in enumerate(entry.values, start=1):
                self._set_cell(row, col, value)
        self._last_table = port_table

    def _set_cell(self, row: int, col: int, text: str) -> None:
        item = self.table.item(row, col)
        if item is None:
            self.table.setItem(row, col, QTableWidgetItem(text))
        elif item.text() != text:
            item.setText(text)

    # @intent:accessor テスト・検査用に、セルの文字列を取得します。
    def cell_text(self, row: int, col: int) -> str:
        item = self.table.item(row, col)
        return item.text() if item else ""

    @property
    def last_table(self) -> Optional[PortTable]:
        return self._last_table
