# src/retro_pio_view/chip/z80pio.py
"""
Z80 PIO チップ状態の定義。

このモジュールは、エミュレータ側が所有・更新するZ80 PIOのレジスタ状態と
ピン状態を保持するデータ構造を定義します。
デバッグパネルはこの状態を借用して読み取るだけで、コピーも変更も行いません。
"""
from dataclasses import dataclass, field
from typing import List

from retro_pio_view.common.types import ChipDesc, PinInfo

# @intent:constant ポートの動作モード（2bitコード）を定義します。
MODE_OUTPUT = 0         # 出力モード
MODE_INPUT = 1          # 入力モード
MODE_BIDIRECTIONAL = 2  # 双方向モード
MODE_BITCONTROL = 3     # ビットコントロールモード

# @intent:constant 割り込み制御バイト内の各フラグビットを定義します。
INTCTRL_EI = 0b10000000            # 割り込み許可/禁止
INTCTRL_ANDOR = 0b01000000         # AND/OR 条件の組み合わせ
INTCTRL_HILO = 0b00100000          # アクティブHigh/Low
INTCTRL_MASK_FOLLOWS = 0b00010000  # 次の制御ワードがマスク

NUM_PORTS = 2
PORT_A = 0
PORT_B = 1

# @intent:constant 64bitピンマスク内の各ピンの位置を定義します。
# CPU側と共有するピン
PIN_D0 = 1 << 16
PIN_D1 = 1 << 17
PIN_D2 = 1 << 18
PIN_D3 = 1 << 19
PIN_D4 = 1 << 20
PIN_D5 = 1 << 21
PIN_D6 = 1 << 22
PIN_D7 = 1 << 23
PIN_M1 = 1 << 24
PIN_IORQ = 1 << 26
PIN_RD = 1 << 27
PIN_INT = 1 << 30

# PIO固有のピン
PIN_CE = 1 << 40     # Chip Enable
PIN_BASEL = 1 << 41  # Port A/B Select
PIN_CDSEL = 1 << 42  # Control/Data Select
PIN_ARDY = 1 << 43
PIN_BRDY = 1 << 44
PIN_ASTB = 1 << 45
PIN_BSTB = 1 << 46

PIN_PA0 = 1 << 48
PIN_PB0 = 1 << 56

DATA_PINS = [PIN_D0, PIN_D1, PIN_D2, PIN_D3, PIN_D4, PIN_D5, PIN_D6, PIN_D7]
PA_PINS = [PIN_PA0 << i for i in range(8)]
PB_PINS = [PIN_PB0 << i for i in range(8)]


# @intent:responsibility 1ポート分のレジスタ状態を保持します。
@dataclass
class PioPortState:
    """
    PIOの1ポート（A または B）のレジスタ状態を保持するデータクラス。
    """
    mode: int = MODE_INPUT   # 2bit モードコード
    output: int = 0x00       # 出力レジスタ
    input: int = 0x00        # 入力レジスタ
    io_select: int = 0x00    # ビットコントロールモード時の入出力選択
    int_control: int = 0x00  # 割り込み制御ワード (EI/ANDOR/HILO)
    int_vector: int = 0x00   # 割り込みベクタ
    int_mask: int = 0xFF     # 割り込みマスク

    # @intent:rationale リセット直後のZ80 PIOは入力モード・マスク全ビット有効で起動するため、
    #                  それに合わせた初期値とする。


# @intent:responsibility Z80 PIO全体の状態（2ポート + ピン）を保持します。
@dataclass
class Z80PioState:
    """
    Z80 PIOのチップ状態。
    portsは常にポートA、ポートBの順に2要素を持ちます。
    """
    ports: List[PioPortState] = field(default_factory=lambda: [PioPortState() for _ in range(NUM_PORTS)])
    pins: int = 0  # 64bit ピンマスク

    # @intent:accessor ポートA/Bに名前でアクセスするためのプロパティ。
    @property
    def port_a(self) -> PioPortState:
        return self.ports[PORT_A]

    @property
    def port_b(self) -> PioPortState:
        return self.ports[PORT_B]


# @intent:responsibility ピン配置図ウィジェット用の標準的な40ピン配置を返します。
def default_pin_layout(name: str = "Z80\nPIO") -> ChipDesc:
    """
    Z80 PIOの40スロットのピン配置を返します。
    左側にデータバスとCPU制御線、右側にポートA/Bのハンドシェイクとデータ線を配置します。
    """
    pins = [PinInfo(f"D{i}", i, mask) for i, mask in enumerate(DATA_PINS)]
    pins += [
        PinInfo("CE", 9, PIN_CE),
        PinInfo("BASEL", 10, PIN_BASEL),
        PinInfo("CDSEL", 11, PIN_CDSEL),
        PinInfo("M1", 12, PIN_M1),
        PinInfo("IORQ", 13, PIN_IORQ),
        PinInfo("RD", 14, PIN_RD),
        PinInfo("INT", 15, PIN_INT),
        PinInfo("ARDY", 20, PIN_ARDY),
        PinInfo("ASTB", 21, PIN_ASTB),
    ]
    pins += [PinInfo(f"PA{i}", 22 + i, mask) for i, mask in enumerate(PA_PINS)]
    pins += [
        PinInfo("BRDY", 30, PIN_BRDY),
        PinInfo("BSTB", 31, PIN_BSTB),
    ]
    pins += [PinInfo(f"PB{i}", 32 + i, mask) for i, mask in enumerate(PB_PINS)]
    return ChipDesc(name=name, num_slots=40, pins=pins)
