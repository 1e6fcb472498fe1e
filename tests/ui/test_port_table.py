# tests/ui/test_port_table.py
"""
retro_pio_view.ui.port_tableモジュールの単体テスト。
"""
import copy

from retro_pio_view.chip.z80pio import Z80PioState, PioPortState, INTCTRL_EI, INTCTRL_ANDOR, INTCTRL_HILO
from retro_pio_view.ui.port_table import build_port_table, ROW_LABELS, HEADER

# @intent:test_suite ポートテーブルの固定レイアウトと内容の検証。

EXPECTED_LABELS = [
    "Mode", "Output", "Input", "IO Select", "INT Ctrl",
    "  ei/di", "  and/or", "  hi/lo", "INT Vec", "INT Mask",
]


def _values(table, label):
    for row in table.rows:
        if row.label == label:
            return row.values
    raise KeyError(label)


class TestPortTableLayout:
    # @intent:test_case_layout 行の順序と数、列数がチップ状態に依存しないことを検証します。
    def test_fixed_layout(self):
        states = [
            Z80PioState(),
            Z80PioState(ports=[PioPortState(mode=7, int_control=0xFF), PioPortState(mode=0, output=0xFF)]),
        ]
        for pio in states:
            table = build_port_table(pio)
            assert [row.label for row in table.rows] == EXPECTED_LABELS
            assert all(len(row.values) == 2 for row in table.rows)
            assert table.header == ("", "PA", "PB")
            # ヘッダ行を含めて11行
            assert len(table.all_rows()) == 11

    def test_row_labels_constant(self):
        assert ROW_LABELS == EXPECTED_LABELS
        assert HEADER == ("", "PA", "PB")


class TestPortTableContent:
    # @intent:test_case_scenario 双方向モード + EIのみ設定時の表示を検証します。
    def test_bidirectional_with_enable_only(self):
        pio = Z80PioState()
        pio.port_a.mode = 2
        pio.port_a.int_control = INTCTRL_EI
        table = build_port_table(pio)
        assert _values(table, "Mode")[0] == "BDIR"
        assert _values(table, "  ei/di")[0] == "EI"
        assert _values(table, "  and/or")[0] == "OR"
        assert _values(table, "  hi/lo")[0] == "LO"
        assert _values(table, "INT Ctrl")[0] == "80"

    def test_hex_rows_per_port(self):
        pio = Z80PioState(ports=[
            PioPortState(mode=0, output=0x12, input=0x34, io_select=0x56, int_control=INTCTRL_ANDOR | INTCTRL_HILO, int_vector=0x78, int_mask=0x9A),
            PioPortState(mode=3, output=0xAB, input=0xCD, io_select=0xEF, int_control=0x00, int_vector=0x01, int_mask=0x02),
        ])
        table = build_port_table(pio)
        assert _values(table, "Mode") == ("OUT", "BITC")
        assert _values(table, "Output") == ("12", "AB")
        assert _values(table, "Input") == ("34", "CD")
        assert _values(table, "IO Select") == ("56", "EF")
        assert _values(table, "INT Ctrl") == ("60", "00")
        assert _values(table, "  ei/di") == ("DI", "DI")
        assert _values(table, "  and/or") == ("AND", "OR")
        assert _values(table, "  hi/lo") == ("HI", "LO")
        assert _values(table, "INT Vec") == ("78", "01")
        assert _values(table, "INT Mask") == ("9A", "02")

    # @intent:test_case_readonly テーブル生成がチップ状態を変更しないことを検証します。
    def test_does_not_mutate_state(self):
        pio = Z80PioState()
        pio.port_b.int_control = 0xE0
        pio.pins = 0x1234
        before = copy.deepcopy(pio)
        build_port_table(pio)
        assert pio == before
