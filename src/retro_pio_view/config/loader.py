# src/retro_pio_view/config/loader.py
import yaml
from typing import Dict, Any
from .models import PanelConfig, WindowConfig, DEFAULT_WINDOW_TITLE

class ConfigLoader:
    def load_from_file(self, path: str) -> PanelConfig:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {path}: {e}") from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> PanelConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config format: expected a mapping, got {type(data).__name__}")

        # Parse Windows
        windows = []
        windows_data = data.get("windows", [])
        if not isinstance(windows_data, list):
            raise ValueError(f"Invalid config format: 'windows' must be a list, got {type(windows_data).__name__}")
        for window_data in windows_data:
            if not isinstance(window_data, dict):
                raise ValueError(f"Invalid window entry: {window_data}")
            title = window_data.get("title")
            if not title:
                raise ValueError(f"Window entry without title: {window_data}")
            windows.append(WindowConfig(
                title=str(title),
                x=self._parse_int(window_data.get("x", 0)),
                y=self._parse_int(window_data.get("y", 0)),
                w=self._parse_int(window_data.get("w", 0)),
                h=self._parse_int(window_data.get("h", 0)),
                open=self._parse_bool(window_data.get("open", True)),
            ))
        if not windows:
            windows.append(WindowConfig(title=DEFAULT_WINDOW_TITLE))

        config = PanelConfig(windows=windows)
        if "settings_path" in data:
            config.settings_path = str(data["settings_path"])
        if "frame_interval_ms" in data:
            config.frame_interval_ms = self._parse_int(data["frame_interval_ms"])
        return config

    def _parse_bool(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise ValueError(f"Invalid boolean format: {value}")

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            try:
                return int(value)
            except ValueError:
                raise ValueError(f"Invalid integer format: {value}")
        raise ValueError(f"Invalid integer format: {value}")
