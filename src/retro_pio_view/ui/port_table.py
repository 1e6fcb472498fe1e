# src/retro_pio_view/ui/port_table.py
"""
ポートテーブルの組み立て。

Z80 PIOの2ポート分のレジスタ状態から、固定の行・列構成を持つ表示用マトリクスを生成します。
行の順序と数は固定で、チップ状態によって変化しません。
"""
from typing import List, NamedTuple, Tuple

from retro_pio_view.chip.z80pio import Z80PioState, PioPortState, NUM_PORTS
from retro_pio_view.ui.decode import decode_mode, flag_label, format_hex8, INT_CTRL_FLAGS

# @intent:constant テーブルのヘッダ（ラベル列 + ポートA/B）。
HEADER: Tuple[str, str, str] = ("", "PA", "PB")

# @intent:constant ラベル列とポート列の固定幅。
COLUMN_WIDTHS: Tuple[int, int, int] = (64, 32, 32)

ROW_LABELS: List[str] = [
    "Mode",
    "Output",
    "Input",
    "IO Select",
    "INT Ctrl",
    *[f.row_label for f in INT_CTRL_FLAGS],
    "INT Vec",
    "INT Mask",
]


# @intent:data_structure テーブルの1行（ラベル + 各ポートの値）。
class PortTableRow(NamedTuple):
    label: str
    values: Tuple[str, ...]


# @intent:data_structure ポートテーブル全体。ヘッダ行と固定数のデータ行を持つ。
class PortTable(NamedTuple):
    header: Tuple[str, ...]
    rows: List[PortTableRow]

    def all_rows(self) -> List[Tuple[str, ...]]:
        """
        ヘッダ行を含む全行を、文字列のタプルとして返します。
        """
        return [self.header] + [(row.label, *row.values) for row in self.rows]


def _port_cells(port: PioPortState) -> List[str]:
    cells = [
        decode_mode(port.mode),
        format_hex8(port.output),
        format_hex8(port.input),
        format_hex8(port.io_select),
        format_hex8(port.int_control),
    ]
    cells += [flag_label(port.int_control, flag) for flag in INT_CTRL_FLAGS]
    cells += [
        format_hex8(port.int_vector),
        format_hex8(port.int_mask),
    ]
    return cells


# @intent:responsibility チップ状態からポートテーブルを生成します。
# @intent:pre-condition pio.portsはポートA、ポートBの2要素を持つ必要があります。
def build_port_table(pio: Z80PioState) -> PortTable:
    """
    チップ状態を読み取り、表示用のポートテーブルを返します。
    チップ状態は一切変更しません。
    """
    columns = [_port_cells(pio.ports[i]) for i in range(NUM_PORTS)]
    rows = [
        PortTableRow(label, tuple(column[row_idx] for column in columns))
        for row_idx, label in enumerate(ROW_LABELS)
    ]
    return PortTable(header=HEADER, rows=rows)
