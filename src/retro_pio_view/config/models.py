# src/retro_pio_view/config/models.py
from dataclasses import dataclass, field
from typing import List

DEFAULT_WINDOW_TITLE = "Z80 PIO"

@dataclass
class WindowConfig:
    title: str = DEFAULT_WINDOW_TITLE
    x: int = 0
    y: int = 0
    w: int = 0  # 0 ならデフォルトサイズ
    h: int = 0
    open: bool = True

@dataclass
class PanelConfig:
    settings_path: str = "pio_view_settings.yaml"
    frame_interval_ms: int = 16  # 約60fps
    windows: List[WindowConfig] = field(default_factory=lambda: [WindowConfig()])
