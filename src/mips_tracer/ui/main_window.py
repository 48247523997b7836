# src/mips_tracer/ui/main_window.py
"""
メインウィンドウの実装。
アプリケーションの主要なUIコンポーネントを保持し、Load/Run/Step/Stop/Resetの操作をコアに中継します。
"""
import sys
from typing import List, Optional

from PySide6.QtWidgets import QMainWindow, QApplication, QDockWidget, QToolBar, QLabel, QFileDialog, QMessageBox
from PySide6.QtGui import QPalette, QColor, QAction, QCloseEvent
from PySide6.QtCore import Qt, QThread, Signal, Slot

from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.config.loader import ConfigLoader
from mips_tracer.config.builder import SystemBuilder
from mips_tracer.config.models import SystemConfig
from mips_tracer.debugger.debugger import Debugger
from mips_tracer.loader.loader import AssemblyLoader
from .code_view import CodeView
from .register_view import RegisterView
from .memory_view import MemoryView
from .fonts import get_monospace_font_family
from .formatting import format_pc

# @intent:responsibility デバッガのrunメソッドをバックグラウンドで実行します。
class DebuggerThread(QThread):
    """
    デバッガのrun()をノンブロッキングで実行するためのスレッド。
    """
    finished_running = Signal()

    def __init__(self, debugger: Debugger):
        super().__init__()
        self.debugger = debugger

    def run(self):
        # run()は終了・停止要求・ブレークポイントのいずれかで戻る
        self.debugger.run()
        self.finished_running.emit()


# @intent:responsibility アプリケーションのメインウィンドウを定義し、UIの主要なコンポーネントを組み立てます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    """
    def __init__(self, config: Optional[SystemConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle("MIPS Tracer")
        self.setGeometry(100, 100, 1000, 700)
        self.setDockNestingEnabled(True)

        # 診断メッセージ（不正な行など）はコンソールに出しつつ、ロード後に通知する
        self._diagnostics: List[str] = []

        self._set_dark_theme()
        self._create_toolbar()
        self._create_views()
        self._create_menus()
        self._setup_backend(config or SystemConfig())

        self._update_ui_state(False) # 初期状態は停止中

    # @intent:responsibility 診断メッセージを記録し、コンソールにも出力します。
    def _log(self, message: str) -> None:
        print(message)
        self._diagnostics.append(message)

    # @intent:responsibility 設定に基づいてバックエンドコンポーネントを初期化します。
    def _setup_backend(self, config: SystemConfig):
        builder = SystemBuilder(log=self._log)
        self.cpu, self.memory = builder.build_system(config)
        self.debugger = Debugger(self.cpu)

        self.debugger_thread = DebuggerThread(self.debugger)
        self.debugger_thread.finished_running.connect(self._on_run_finished)

        self.code_view.set_cpu(self.cpu)
        self.refresh()

    # @intent:responsibility メニューバーを作成し、ファイル操作アクションを追加します。
    def _create_menus(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")

        file_menu.addAction(self.load_action)

        self.load_config_action = QAction("Load System Config...", self)
        self.load_config_action.triggered.connect(self._load_system_config)
        file_menu.addAction(self.load_config_action)

    # @intent:responsibility 実行制御用のツールバーを作成します。
    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        self.addToolBar(toolbar)

        self.load_action = QAction("Load", self)
        self.load_action.setShortcut("Ctrl+O")
        self.load_action.triggered.connect(self._load_program_dialog)
        toolbar.addAction(self.load_action)

        self.run_action = QAction("Run", self)
        self.run_action.triggered.connect(self._run_debugger)
        toolbar.addAction(self.run_action)

        self.stop_action = QAction("Stop", self)
        self.stop_action.triggered.connect(self._stop_debugger)
        toolbar.addAction(self.stop_action)

        self.step_action = QAction("Step", self)
        self.step_action.triggered.connect(self._step_debugger)
        toolbar.addAction(self.step_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.triggered.connect(self._reset_debugger)
        toolbar.addAction(self.reset_action)

        toolbar.addSeparator()
        self.pc_label = QLabel(format_pc(0), self)
        toolbar.addWidget(self.pc_label)

    # @intent:responsibility 命令リストを中央に、変更レジスタ/メモリをドックに配置します。
    def _create_views(self):
        self.code_view = CodeView()
        self.setCentralWidget(self.code_view)

        register_dock = QDockWidget("Registers", self)
        register_dock.setAllowedAreas(Qt.RightDockWidgetArea)
        self.register_view = RegisterView()
        register_dock.setWidget(self.register_view)
        self.addDockWidget(Qt.RightDockWidgetArea, register_dock)

        memory_dock = QDockWidget("Memory", self)
        memory_dock.setAllowedAreas(Qt.RightDockWidgetArea)
        self.memory_view = MemoryView()
        memory_dock.setWidget(self.memory_view)
        self.addDockWidget(Qt.RightDockWidgetArea, memory_dock)

    # @intent:responsibility 実行状態に応じてUIコンポーネントの有効/無効を切り替えます。
    def _update_ui_state(self, is_running: bool):
        self.load_action.setEnabled(not is_running)
        self.load_config_action.setEnabled(not is_running)
        self.run_action.setEnabled(not is_running)
        self.step_action.setEnabled(not is_running)
        self.stop_action.setEnabled(is_running)

    # @intent:responsibility 現在のCPU状態で全ビューを更新します。
    def refresh(self):
        pc = self.cpu.get_pc()
        self.pc_label.setText(format_pc(pc))
        self.code_view.update_code(pc)
        self.register_view.update_registers(self.cpu)
        self.memory_view.update_memory(self.cpu)

    # @intent:responsibility デバッガの連続実行を開始します。即座に戻ります。
    @Slot()
    def _run_debugger(self):
        if self.debugger_thread.isRunning():
            return
        self._update_ui_state(True)
        self.debugger_thread.start()

    # @intent:responsibility デバッガの連続実行を停止します（次の命令境界で停止）。
    @Slot()
    def _stop_debugger(self):
        self.debugger.stop()

    @Slot()
    def _on_run_finished(self):
        self._update_ui_state(False)
        self.refresh()

    # @intent:responsibility デバッガを1ステップ実行します。
    @Slot()
    def _step_debugger(self):
        self.debugger.step_instruction()
        self.refresh()

    # @intent:responsibility 連続実行を止めてスレッドの終了を待ち、CPUをリセットします。
    @Slot()
    def _reset_debugger(self):
        self._halt_thread()
        self.debugger.reset()
        self._update_ui_state(False)
        self.refresh()

    def _halt_thread(self):
        self.debugger.stop()
        if self.debugger_thread.isRunning():
            self.debugger_thread.wait()

    @Slot()
    def _load_program_dialog(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open Assembly File", "", "Assembly Files (*.asm *.s *.txt);;All Files (*)")
        if file_name:
            self.load_program(file_name)

    # @intent:responsibility アセンブリファイルをロードし、表示を初期状態に更新します。
    def load_program(self, file_name: str) -> List[Instruction]:
        self._halt_thread()
        self._diagnostics = []

        loader = AssemblyLoader(log=self._log)
        program = loader.load_assembly(file_name, self.cpu)

        # 命令リストのキャッシュをクリア（プログラムが変わったため）
        self.code_view.reset_cache()
        self.refresh()

        if self._diagnostics:
            QMessageBox.warning(self, "Load Program", "\n".join(self._diagnostics))
        return program

    @Slot()
    def _load_system_config(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open System Config", "", "YAML Files (*.yaml *.yml);;All Files (*)")
        if file_name:
            try:
                config = ConfigLoader().load_from_file(file_name)
            except (OSError, ValueError) as e:
                QMessageBox.critical(self, "Error", f"Failed to load system config: {e}")
                return

            self._halt_thread()
            self._setup_backend(config)
            QMessageBox.information(self, "System Config", f"Successfully loaded system config from {file_name}")

    # @intent:responsibility アプリケーションにダークテーマのスタイルシートを適用します。
    def _set_dark_theme(self):
        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(29, 29, 29))
        dark_palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Base, QColor(30, 30, 30))
        dark_palette.setColor(QPalette.Text, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        dark_palette.setColor(QPalette.HighlightedText, QColor(0, 0, 0))
        QApplication.setPalette(dark_palette)

        font_family = get_monospace_font_family()
        self.setStyleSheet(f"""
            QWidget {{ font-family: '{font_family}', monospace; font-size: 10pt; }}
            QMainWindow, QToolBar {{ background-color: #1D1D1D; border: none; }}
            QDockWidget::title {{ text-align: left; background: #101010; padding: 4px; font-weight: bold; }}
        """)

    # @intent:responsibility アプリケーション終了時に呼ばれ、バックグラウンドスレッドを安全に停止します。
    def closeEvent(self, event: QCloseEvent):
        if self.debugger_thread.isRunning():
            # UI更新シグナルを切断して、終了待ち中のシグナル配送を防ぐ
            try:
                self.debugger_thread.finished_running.disconnect(self._on_run_finished)
            except RuntimeError:
                pass # 接続されていない場合は無視

            self._halt_thread()
        event.accept()


if __name__ == '__main__':
    app = QApplication(sys.argv)
    main_win = MainWindow()
    main_win.show()
    sys.exit(app.exec())
