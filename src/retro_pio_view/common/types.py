# src/retro_pio_view/common/types.py
"""
共通の型定義を提供するモジュール。
チップのピン配置図など、UIの複数箇所で共有される表示定義を定義します。
"""
from typing import List, NamedTuple

# @intent:data_structure 単一ピンの表示定義。スロット番号はチップ外周の位置（0始まり）を表す。
class PinInfo(NamedTuple):
    name: str
    slot: int
    mask: int  # ピンマスク内のビット

# @intent:data_structure チップ全体のピン配置定義。ピン配置図ウィジェットの初期化に使用される。
class ChipDesc(NamedTuple):
    name: str
    num_slots: int  # 左右に半数ずつ配置される
    pins: List[PinInfo]
