# src/retro_pio_view/ui/window_state.py
"""
デバッグウィンドウのライフサイクル状態。

ウィンドウの開閉状態、初期ジオメトリ、有効フラグを保持し、
init/discard の契約（事前条件）を検査する責務を負います。
Qtには依存しません。
"""
from dataclasses import dataclass, field
from typing import Optional

from retro_pio_view.chip.z80pio import Z80PioState, default_pin_layout
from retro_pio_view.common.types import ChipDesc

# @intent:constant 幅・高さに0が指定された場合のデフォルトサイズ。
DEFAULT_WIDTH = 360
DEFAULT_HEIGHT = 364


# @intent:responsibility 破棄済みウィンドウの使用（契約違反）を表します。
class WindowDiscardedError(RuntimeError):
    pass


# @intent:responsibility PIOウィンドウの初期化パラメータを定義します。
@dataclass
class PioWindowDesc:
    """
    PIOウィンドウの初期化パラメータ。
    titleとpioはウィンドウが破棄されるまで呼び出し側が保持し続ける必要があります。
    """
    title: Optional[str]
    pio: Optional[Z80PioState]
    x: int = 0
    y: int = 0
    w: int = 0  # 0 ならデフォルト幅
    h: int = 0  # 0 ならデフォルト高さ
    open: bool = False
    chip_desc: ChipDesc = field(default_factory=default_pin_layout)


# @intent:responsibility ウィンドウの開閉・ジオメトリ・有効性の状態を保持します。
@dataclass
class WindowState:
    """
    ウィンドウのライフサイクル状態。
    openはユーザー操作で変化し、last_openは前フレームの値として変化検出にのみ使われます。
    """
    title: str
    pio: Z80PioState
    init_x: float
    init_y: float
    init_w: float
    init_h: float
    open: bool = False
    last_open: bool = False
    valid: bool = False

    # @intent:responsibility 初期化パラメータからウィンドウ状態を生成します（init）。
    # @intent:pre-condition desc.titleとdesc.pioはNoneであってはなりません。
    @classmethod
    def from_desc(cls, desc: PioWindowDesc) -> "WindowState":
        if desc is None:
            raise ValueError("Window descriptor is required.")
        if desc.title is None:
            raise ValueError("Window title is required.")
        if desc.pio is None:
            raise ValueError("PIO state reference is required.")
        return cls(
            title=desc.title,
            pio=desc.pio,
            init_x=float(desc.x),
            init_y=float(desc.y),
            init_w=float(DEFAULT_WIDTH if desc.w == 0 else desc.w),
            init_h=float(DEFAULT_HEIGHT if desc.h == 0 else desc.h),
            open=desc.open,
            last_open=desc.open,
            valid=True,
        )

    # @intent:responsibility 破棄後や必須参照の欠落時に、操作を拒否します。
    def require_valid(self) -> None:
        if not self.valid:
            raise WindowDiscardedError(f"Window '{self.title}' has already been discarded.")
        if self.title is None or self.pio is None:
            raise ValueError("Window title and PIO state reference are required.")

    # @intent:responsibility ウィンドウを無効化します（discard）。以後の操作は全て契約違反となります。
    def discard(self) -> None:
        self.require_valid()
        self.valid = False
