"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from draughts.core.enums import Color, PieceVariant
from draughts.core.errors import ParseError

_CROWNED_SUFFIX = ":CROWNED"
_EMPTY_LABEL = "EMPTY"

# Serialized colour token ↔ Color
_COLOR_TOKENS: dict[str, Color] = {
    "WHITE": Color.WHITE,
    "BLACK": Color.BLACK,
}

_SYMBOLS: dict[tuple[Color, PieceVariant], str] = {
    (Color.WHITE, PieceVariant.DEFAULT): "○",
    (Color.BLACK, PieceVariant.DEFAULT): "●",
    (Color.WHITE, PieceVariant.CROWNED): "♔",
    (Color.BLACK, PieceVariant.CROWNED): "♚",
}
_EMPTY_SYMBOL = "·"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable occupant of a single cell.

    ``color is None`` marks an empty cell. Colour and variant only carry
    meaning for occupied cells, so an empty piece is always ``DEFAULT``.
    """

    color: Color | None = None
    variant: PieceVariant = PieceVariant.DEFAULT

    def __post_init__(self) -> None:
        if self.color is None and self.variant != PieceVariant.DEFAULT:
            raise ValueError("An empty piece cannot be crowned")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Piece:
        return EMPTY

    @classmethod
    def man(cls, color: Color) -> Piece:
        return cls(color, PieceVariant.DEFAULT)

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls(color, PieceVariant.CROWNED)

    def crowned(self) -> Piece:
        """Promoted copy of this piece."""
        if self.color is None:
            raise ValueError("Cannot crown an empty piece")
        return Piece(self.color, PieceVariant.CROWNED)

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def from_label(cls, label: str) -> Piece:
        """Decode a label such as ``"WHITE"`` or ``"BLACK:CROWNED"``."""
        if not isinstance(label, str):
            raise ParseError(f"Invalid piece label: {label!r}")
        if label == _EMPTY_LABEL:
            return EMPTY

        token, crowned = label, False
        if label.endswith(_CROWNED_SUFFIX):
            token, crowned = label[: -len(_CROWNED_SUFFIX)], True
        try:
            color = _COLOR_TOKENS[token]
        except KeyError:
            raise ParseError(f"Invalid piece label: {label!r}") from None
        return cls(color, PieceVariant.CROWNED if crowned else PieceVariant.DEFAULT)

    @property
    def label(self) -> str:
        """Persistent label, the inverse of :meth:`from_label`."""
        if self.color is None:
            return _EMPTY_LABEL
        text = self.color.name
        if self.variant == PieceVariant.CROWNED:
            text += _CROWNED_SUFFIX
        return text

    # ── Queries ──────────────────────────────────────────────────────────

    def is_empty(self) -> bool:
        return self.color is None

    def is_of_color(self, color: Color) -> bool:
        return self.color is not None and self.color == color

    def is_own_piece(self, color: Color) -> bool:
        """Whether a player of *color* may move this piece."""
        return self.is_of_color(color)

    def is_of_opposite_color(self, other: Piece) -> bool:
        """True only when both pieces are occupied and their colours differ."""
        if self.color is None or other.color is None:
            return False
        return self.color != other.color

    def is_crowned(self) -> bool:
        return self.color is not None and self.variant == PieceVariant.CROWNED

    def is_white(self) -> bool:
        return self.is_of_color(Color.WHITE)

    def is_black(self) -> bool:
        return self.is_of_color(Color.BLACK)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """Glyph shown on the board; never persisted."""
        if self.color is None:
            return _EMPTY_SYMBOL
        return _SYMBOLS[(self.color, self.variant)]

    def __str__(self) -> str:
        return self.symbol


EMPTY = Piece()
