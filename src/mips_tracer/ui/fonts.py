"""
UIフォント管理モジュール。

クロスプラットフォーム（Windows/Mac/Linux）で最適な等幅フォントを選択し、ウィジェットに適用する機能を提供します。
"""
from functools import lru_cache

from PySide6.QtGui import QFont, QFontDatabase
from PySide6.QtWidgets import QWidget

PREFERRED_FONTS = ("Consolas", "Menlo", "DejaVu Sans Mono", "Courier New")

# @intent:responsibility 現在のシステムで利用可能な最適な等幅フォントファミリー名を返します。
# @intent:rationale フォントDBの問い合わせはビューの生成ごとに発生するため、結果をキャッシュする。
@lru_cache(maxsize=1)
def get_monospace_font_family() -> str:
    available_families = QFontDatabase.families()
    for font in PREFERRED_FONTS:
        if font in available_families:
            return font
    return QFontDatabase.systemFont(QFontDatabase.FixedFont).family()

def get_monospace_font(size: int = 10) -> QFont:
    return QFont(get_monospace_font_family(), size)

# @intent:responsibility ウィジェットに等幅フォントとダークテーマの配色を適用します。
def apply_monospace(widget: QWidget, size: int = 10) -> None:
    widget.setFont(get_monospace_font(size))
    widget.setStyleSheet("background-color: #101010; color: #BBBBBB;")
