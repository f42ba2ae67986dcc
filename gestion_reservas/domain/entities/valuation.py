"""Entidad Valuation - valoración de una estancia."""

from dataclasses import dataclass
from datetime import datetime

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass
class Valuation:
    """
    Valoración que deja un cliente tras su estancia.

    Una reserva puede tener varias valoraciones.
    """

    id: int | None = None
    reservation_id: int = 0
    score: int = MAX_SCORE
    comment: str | None = None
    anonymous: bool = False
    rated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise ValueError(f"La puntuación debe estar entre {MIN_SCORE} y {MAX_SCORE}: {self.score}")
