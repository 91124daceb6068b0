"""Shared widgets: background, cards, level picker and button styles."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QLinearGradient, QPainter
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from kelime.core.words import LEVELS
from kelime.ui.colors import HomeColors, level_badge_colors


def primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {HomeColors.PRIMARY_LIGHT}, stop:1 {HomeColors.PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 10px;
            font-weight: 600;
            font-size: 14px;
        }}
        QPushButton:hover {{ background: {HomeColors.PRIMARY}; }}
        QPushButton:disabled {{ background: #cbd5e1; color: #f8fafc; }}
    """


def secondary_button_style() -> str:
    return f"""
        QPushButton {{
            background: #ffffff;
            color: {HomeColors.TEXT_PRIMARY};
            padding: 10px 16px;
            border: 1px solid #e2e8f0;
            border-radius: 10px;
            font-weight: 600;
            font-size: 14px;
        }}
        QPushButton:hover {{
            border-color: {HomeColors.PRIMARY};
            color: {HomeColors.PRIMARY};
        }}
        QPushButton:disabled {{ color: #cbd5e1; border-color: #f1f5f9; }}
    """


def star_button_style() -> str:
    return f"""
        QPushButton {{
            background: transparent;
            border: none;
            color: {HomeColors.STAR};
            font-size: 22px;
        }}
    """


class GradientBackground(QWidget):
    """Soft top-to-bottom blue gradient behind every screen."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(HomeColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(HomeColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)


class Card(QFrame):
    """White rounded card with a soft drop shadow."""

    def __init__(self, radius: int = 16, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setStyleSheet(
            f"""
            QFrame#card {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: {radius}px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(20)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(15, 23, 42, 40))
        self.setGraphicsEffect(shadow)


class LevelBadge(QLabel):
    """Small rounded label showing a word level."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedHeight(22)

    def set_level(self, level: str) -> None:
        background, text = level_badge_colors(level)
        self.setText(level)
        self.setStyleSheet(
            f"background: {background}; color: {text}; border-radius: 5px;"
            " padding: 0 8px; font-size: 11px; font-weight: 700;"
        )


class LevelPicker(QWidget):
    """Segmented control over All, A1 ... C2."""

    level_changed = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: dict[str, QPushButton] = {}
        for i, level in enumerate(LEVELS):
            button = QPushButton(level)
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            left = 8 if i == 0 else 0
            right = 8 if i == len(LEVELS) - 1 else 0
            button.setStyleSheet(
                f"""
                QPushButton {{
                    background: #f1f5f9;
                    color: {HomeColors.TEXT_PRIMARY};
                    border: 1px solid #e2e8f0;
                    border-top-left-radius: {left}px;
                    border-bottom-left-radius: {left}px;
                    border-top-right-radius: {right}px;
                    border-bottom-right-radius: {right}px;
                    padding: 6px 10px;
                    font-weight: 600;
                }}
                QPushButton:checked {{ background: #ffffff; color: {HomeColors.PRIMARY}; }}
                """
            )
            button.clicked.connect(lambda _checked=False, lv=level: self.level_changed.emit(lv))
            self._group.addButton(button)
            self._buttons[level] = button
            layout.addWidget(button, 1)

    def set_level(self, level: str) -> None:
        button = self._buttons.get(level)
        if button is not None:
            button.setChecked(True)
