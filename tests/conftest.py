# tests/conftest.py
"""
テスト共通のフィクスチャ。
PySide6のウィジェットテストには、表示環境のないCIでも動作するoffscreenプラットフォームを使用します。
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# PySide6のテストにはQApplicationのインスタンスが必要
@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
