# src/retro_pio_view/ui/decode.py
"""
Z80 PIOレジスタのデコーダ。

生のレジスタ値を、表示用の文字列・ラベルに変換する純粋関数群を提供します。
ウィンドウのインスタンス状態には一切依存しません。
"""
from typing import Dict, List, NamedTuple

from retro_pio_view.chip.z80pio import (
    MODE_OUTPUT, MODE_INPUT, MODE_BIDIRECTIONAL, MODE_BITCONTROL,
    INTCTRL_EI, INTCTRL_ANDOR, INTCTRL_HILO,
)

# @intent:constant モードコードと表示ラベルの対応表。
MODE_LABELS: Dict[int, str] = {
    MODE_OUTPUT: "OUT",
    MODE_INPUT: "INP",
    MODE_BIDIRECTIONAL: "BDIR",
    MODE_BITCONTROL: "BITC",
}
INVALID_LABEL = "INVALID"


# @intent:data_structure 割り込み制御バイト内の1フラグの表示定義。
class FlagLabel(NamedTuple):
    row_label: str
    mask: int
    set_label: str
    clear_label: str


# @intent:constant 割り込み制御バイトの3つの独立したフラグ（表示順）。
INT_CTRL_FLAGS: List[FlagLabel] = [
    FlagLabel("  ei/di", INTCTRL_EI, "EI", "DI"),
    FlagLabel("  and/or", INTCTRL_ANDOR, "AND", "OR"),
    FlagLabel("  hi/lo", INTCTRL_HILO, "HI", "LO"),
]


# @intent:responsibility 2bitのモードコードを表示ラベルに変換します。
# @intent:rationale 2bitフィールドからは到達しませんが、範囲外の値には"INVALID"を返し、表示を壊さないようにします。
def decode_mode(code: int) -> str:
    return MODE_LABELS.get(code, INVALID_LABEL)


# @intent:responsibility 制御バイト内の単一フラグが立っているかを判定します。
def decode_flag(value: int, mask: int) -> bool:
    return (value & mask) != 0


def flag_label(value: int, flag: FlagLabel) -> str:
    """
    フラグの状態に応じて、2値ラベル（例: "EI"/"DI"）のどちらかを返します。
    """
    return flag.set_label if decode_flag(value, flag.mask) else flag.clear_label


# @intent:responsibility 8bit値を2桁の大文字16進数文字列に変換します。
def format_hex8(value: int) -> str:
    return f"{value & 0xFF:02X}"
