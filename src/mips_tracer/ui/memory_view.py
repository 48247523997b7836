"""
リセット以降にストアされたメモリワードを表示するウィジェット。
"""
from typing import List

from PySide6.QtWidgets import QWidget, QVBoxLayout, QListWidget

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.ui.fonts import apply_monospace
from mips_tracer.ui.formatting import changed_memory_entries, format_memory_entry

# @intent:responsibility 変更されたメモリワードを "アドレス: 符号なし値" の一覧で表示します。
class MemoryView(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)
        self.list_widget = QListWidget()
        apply_monospace(self.list_widget)
        self.layout.addWidget(self.list_widget)

    def update_memory(self, cpu: MipsCpu) -> None:
        self.list_widget.clear()
        for entry in changed_memory_entries(cpu):
            self.list_widget.addItem(format_memory_entry(entry))

    def items(self) -> List[str]:
        return [self.list_widget.item(i).text() for i in range(self.list_widget.count())]
