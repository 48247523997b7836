"""
ロード済みプログラムの命令リストを表示するウィジェット。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableWidget, QTableWidgetItem, QHeaderView
from PySide6.QtGui import QColor

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.common.types import Listing
from mips_tracer.ui.fonts import apply_monospace
from mips_tracer.ui.formatting import highlight_index

HIGHLIGHT_COLOR = QColor("#404000") # Dark Yellow
NORMAL_COLOR = QColor("#101010")    # Default Background

# @intent:responsibility 命令リストを表形式で表示し、現在のPCが指す命令をハイライトするUIウィジェットを提供します。
class CodeView(QWidget):
    """
    命令リストを表示するウィジェット。
    行 i はアドレス 4*i の命令に対応します。
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget()
        self.table.setColumnCount(2)
        self.table.setHorizontalHeaderLabels(["Address", "Instruction"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeToContents) # Address
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.Stretch)          # Instruction
        apply_monospace(self.table)

        # 行ヘッダ（番号）を隠す
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setShowGrid(False)

        self.layout.addWidget(self.table)

        self._cpu: Optional[MipsCpu] = None
        self.highlighted_row: Optional[int] = None
        # 現在表示している命令リスト [(addr, imm, text), ...]
        self.listing: Listing = []

    def set_cpu(self, cpu: MipsCpu) -> None:
        self._cpu = cpu
        self.reset_cache()

    # @intent:responsibility 命令リストを（必要なら再構築して）表示し、PCの命令をハイライトします。
    def update_code(self, pc: int) -> None:
        """
        リストが空の場合のみプログラムから再構築し、それ以外はハイライト移動のみ行います。
        """
        if self._cpu is None:
            return

        if not self.listing:
            program = self._cpu.get_program()
            self.listing = self._cpu.disassemble(0, len(program) * 4)
            self.table.setRowCount(len(self.listing))
            for row, (line, instruction) in enumerate(zip(self.listing, program)):
                self.table.setItem(row, 0, QTableWidgetItem(f"{line.address:04X}"))
                self.table.setItem(row, 1, QTableWidgetItem(instruction.representation()))

        row_index = highlight_index(pc, self.table.rowCount())
        self.highlighted_row = row_index

        for row in range(self.table.rowCount()):
            color = HIGHLIGHT_COLOR if row == row_index else NORMAL_COLOR
            for column in range(self.table.columnCount()):
                self.table.item(row, column).setBackground(color)

        if row_index is None:
            self.table.clearSelection()
        else:
            self.table.selectRow(row_index)
            self.table.scrollToItem(self.table.item(row_index, 0), QTableWidget.EnsureVisible)

    # @intent:responsibility 内部キャッシュをクリアし、次回のupdate_codeで再構築させます。
    def reset_cache(self) -> None:
        """
        新しいプログラムをロードした場合に呼び出してください。
        """
        self.listing = []
        self.highlighted_row = None
        self.table.setRowCount(0)
