"""Visual theme constants for the board widget."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_cell: QColor
    dark_cell: QColor
    selected_cell: QColor
    piece_text: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_cell=QColor(240, 217, 181),  # tan
            dark_cell=QColor(181, 136, 99),  # brown
            selected_cell=QColor(155, 199, 0),  # green
            piece_text=QColor(20, 20, 20),
        )

    def cell_style(self, color: QColor) -> str:
        return (
            f"background-color: {color.name()}; color: {self.piece_text.name()}; "
            "border: none; font-size: 26px;"
        )
