# src/mips_tracer/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
アプリケーションを初期化し、メインウィンドウを起動します。
"""
import sys
from PySide6.QtWidgets import QApplication
from mips_tracer.config.loader import ConfigLoader
from mips_tracer.config.models import SystemConfig
from .main_window import MainWindow

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main():
    """
    アプリケーションのメイン関数。
    第1引数にYAMLのシステム構成ファイルを指定できます。
    """
    app = QApplication(sys.argv)

    config = SystemConfig()
    if len(sys.argv) > 1:
        config = ConfigLoader().load_from_file(sys.argv[1])

    main_win = MainWindow(config)
    main_win.show()
    sys.exit(app.exec())

if __name__ == '__main__':
    main()
