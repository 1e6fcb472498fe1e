# src/retro_pio_view/ui/fonts.py
"""
UIフォント管理モジュール。

レジスタ値やピン名を揃えて表示するための等幅フォントを選択します。
"""
from PySide6.QtGui import QFont, QFontDatabase

# @intent:constant 優先して使用する等幅フォント（Windows/Mac/Linux）。
PREFERRED_FONTS = ["Consolas", "Menlo", "Monaco", "DejaVu Sans Mono", "Courier New"]

# @intent:responsibility 現在のシステムで利用可能な最適な等幅フォントファミリー名を返します。
def get_monospace_font_family() -> str:
    available_families = QFontDatabase.families()
    for font in PREFERRED_FONTS:
        if font in available_families:
            return font
    return QFontDatabase.systemFont(QFontDatabase.FixedFont).family()

# @intent:responsibility ポートテーブルとピン配置図で共通に使う等幅フォントを返します。
def get_monospace_font(size: int = 9, bold: bool = False) -> QFont:
    font = QFont(get_monospace_font_family(), size)
    font.setBold(bold)
    return font
