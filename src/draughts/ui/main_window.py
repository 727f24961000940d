"""MainWindow — top-level window wiring the board widget to a game session."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from draughts.core.enums import Color
from draughts.core.move import Capture, Invalid, Move
from draughts.core.types import cell_name
from draughts.game.session import GameSession, MoveRecord
from draughts.ui.board_widget import BoardWidget
from draughts.ui.i18n import set_language, t
from draughts.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        set_language(self._settings.language)
        self.setWindowTitle(t().window_title)

        self._session = GameSession(promote=self._settings.promote_on_last_row)
        self._session.events.on_move.append(self._on_move)
        self._session.events.on_rejected.append(self._on_rejected)

        self._board_widget = BoardWidget(self)
        self._board_widget.set_show_coordinates(self._settings.show_coordinates)
        self._board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.setCentralWidget(self._board_widget)

        self._count_label = QLabel(self)
        status = QStatusBar(self)
        status.addPermanentWidget(self._count_label)
        self.setStatusBar(status)

        self._setup_menu()
        self._refresh()
        status.showMessage(t().status_ready)

    def _setup_menu(self) -> None:
        menu = self.menuBar().addMenu(t().menu_game)

        new_game = QAction(t().menu_new_game, self)
        new_game.triggered.connect(self.new_game)
        menu.addAction(new_game)

        quit_action = QAction(t().menu_quit, self)
        quit_action.triggered.connect(self.close)
        menu.addAction(quit_action)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    def status_text(self) -> str:
        return self.statusBar().currentMessage()

    def new_game(self) -> None:
        self._session.new_game()
        self._refresh()
        self.statusBar().showMessage(t().status_ready)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_cell_clicked(self, row: int, col: int) -> None:
        info = self._session.select(row, col)
        selected = self._session.selected
        if selected is not None:
            self.statusBar().showMessage(
                t().status_selected.format(cell=cell_name(*selected))
            )
        elif info is None:
            self.statusBar().showMessage(t().status_ready)
        self._refresh()

    def _on_move(self, record: MoveRecord) -> None:
        if isinstance(record.info, Capture):
            text = t().status_capture.format(
                move=record.move, victim=cell_name(*record.info.victim)
            )
        else:
            text = t().status_step.format(move=record.move)
        if record.promoted:
            text += t().status_crowned
        self.statusBar().showMessage(text)

    def _on_rejected(self, _move: Move, info: Invalid) -> None:
        self.statusBar().showMessage(t().invalid_reason(info.reason))

    def _refresh(self) -> None:
        board = self._session.board
        self._board_widget.set_board(board)
        self._board_widget.set_selected(self._session.selected)
        self._count_label.setText(
            t().status_count.format(
                white=len(board.pieces(Color.WHITE)),
                black=len(board.pieces(Color.BLACK)),
            )
        )
