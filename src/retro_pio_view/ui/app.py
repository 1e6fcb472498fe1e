# src/retro_pio_view/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
構成ファイルを読み込み、メインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from retro_pio_view.config.loader import ConfigLoader
from retro_pio_view.config.models import PanelConfig
from .main_window import MainWindow


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Z80 PIO debug inspection panel")
    parser.add_argument("--config", help="YAML panel configuration file")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = ConfigLoader().load_from_file(args.config) if args.config else PanelConfig()

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(config)
    main_win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
