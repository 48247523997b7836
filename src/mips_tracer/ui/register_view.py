"""
リセット以降に書き込まれたレジスタを表示するウィジェット。
"""
from typing import List

from PySide6.QtWidgets import QWidget, QVBoxLayout, QListWidget

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.ui.fonts import apply_monospace
from mips_tracer.ui.formatting import changed_register_entries, format_register_entry

# @intent:responsibility 変更されたレジスタを "名前: 符号なし値" の一覧で表示します。
class RegisterView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)
        self.list_widget = QListWidget()
        apply_monospace(self.list_widget)
        self.layout.addWidget(self.list_widget)

    def update_registers(self, cpu: MipsCpu) -> None:
        self.list_widget.clear()
        for entry in changed_register_entries(cpu):
            self.list_widget.addItem(format_register_entry(entry))

    def items(self) -> List[str]:
        return [self.list_widget.item(i).text() for i in range(self.list_widget.count())]
