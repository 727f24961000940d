"""BoardWidget — grid of cell buttons showing a draughts board."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from draughts.core.board import Board
from draughts.core.types import BOARD_SIZE, Cell, cell_name, is_dark_cell
from draughts.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """One push button per cell plus rank/file labels.

    Signals:
        cell_clicked(int, int): Emitted with (row, col) when a cell is pressed.
    """

    cell_clicked = pyqtSignal(int, int)

    CELL = 56  # px per cell

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._selected: Cell | None = None
        self._buttons: dict[Cell, QPushButton] = {}
        self._coord_labels: list[QLabel] = []

        layout = QGridLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(4, 4, 4, 4)

        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                btn = QPushButton(self)
                btn.setFixedSize(self.CELL, self.CELL)
                btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
                btn.clicked.connect(
                    lambda _checked=False, r=r, c=c: self.cell_clicked.emit(r, c)
                )
                layout.addWidget(btn, r, c + 1)
                self._buttons[(r, c)] = btn

        # Rank labels on the left, file labels along the bottom
        for r in range(BOARD_SIZE):
            self._add_coord(layout, cell_name(r, 0)[1:], r, 0)
        for c in range(BOARD_SIZE):
            self._add_coord(layout, cell_name(0, c)[0], BOARD_SIZE, c + 1)

        self._restyle()

    def _add_coord(self, layout: QGridLayout, text: str, row: int, col: int) -> None:
        label = QLabel(text, self)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(label, row, col)
        self._coord_labels.append(label)

    # ── Public API ───────────────────────────────────────────────────────

    def button(self, row: int, col: int) -> QPushButton:
        return self._buttons[(row, col)]

    def set_board(self, board: Board) -> None:
        """Refresh every cell's glyph from *board*."""
        for r, row in enumerate(board.rows()):
            for c, piece in enumerate(row):
                btn = self._buttons.get((r, c))
                if btn is not None:
                    btn.setText("" if piece.is_empty() else piece.symbol)

    def set_selected(self, cell: Cell | None) -> None:
        self._selected = cell
        self._restyle()

    def selected(self) -> Cell | None:
        return self._selected

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        for label in self._coord_labels:
            label.setVisible(visible)

    # ── Internals ────────────────────────────────────────────────────────

    def _restyle(self) -> None:
        for (r, c), btn in self._buttons.items():
            if (r, c) == self._selected:
                color = self._theme.selected_cell
            elif is_dark_cell(r, c):
                color = self._theme.dark_cell
            else:
                color = self._theme.light_cell
            btn.setStyleSheet(self._theme.cell_style(color))
