"""Internationalisation strings for the draughts UI.

Usage::

    from draughts.ui.i18n import t, set_language

    set_language("Russian")
    print(t().menu_new_game)
    print(t().invalid_reason(InvalidReason.TO_OCCUPIED))
"""

from __future__ import annotations

from dataclasses import dataclass

from draughts.core.enums import Color, InvalidReason


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str

    status_ready: str
    status_selected: str  # "Selected {cell}"
    status_step: str  # "{move}"
    status_capture: str  # "{move}, captured {victim}"
    status_crowned: str  # suffix appended on promotion
    status_count: str  # "White: {white} · Black: {black}"
    color_white: str
    color_black: str

    # Rejection reasons, one per InvalidReason
    invalid_from_empty: str
    invalid_to_occupied: str
    invalid_distance: str
    invalid_victim: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black

    def invalid_reason(self, reason: InvalidReason) -> str:
        """Distinct user-facing text for each rejected hop."""
        return {
            InvalidReason.FROM_EMPTY: self.invalid_from_empty,
            InvalidReason.TO_OCCUPIED: self.invalid_to_occupied,
            InvalidReason.INVALID_DISTANCE: self.invalid_distance,
            InvalidReason.INVALID_VICTIM: self.invalid_victim,
        }[reason]


_EN = Strings(
    window_title="Draughts",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    status_ready="Ready",
    status_selected="Selected {cell}",
    status_step="{move}",
    status_capture="{move}, captured {victim}",
    status_crowned=" (crowned)",
    status_count="White: {white} · Black: {black}",
    color_white="White",
    color_black="Black",
    invalid_from_empty="There is no piece on the starting cell.",
    invalid_to_occupied="The target cell is already occupied.",
    invalid_distance="Pieces move diagonally; men step one cell forward or jump two.",
    invalid_victim="You cannot jump over your own piece.",
)

_RU = Strings(
    window_title="Шашки",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    status_ready="Готово",
    status_selected="Выбрано поле {cell}",
    status_step="{move}",
    status_capture="{move}, взята шашка на {victim}",
    status_crowned=" (дамка)",
    status_count="Белые: {white} · Чёрные: {black}",
    color_white="Белые",
    color_black="Чёрные",
    invalid_from_empty="На начальном поле нет шашки.",
    invalid_to_occupied="Целевое поле уже занято.",
    invalid_distance="Ходить можно только по диагонали: простая шашка идёт на одно поле вперёд или бьёт через одно.",
    invalid_victim="Нельзя перепрыгивать через свою шашку.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
