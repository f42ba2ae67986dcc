from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from gestion_reservas.domain.entities.valuation import MAX_SCORE, MIN_SCORE


class ValuationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    reservation_id: int = Field(gt=0)
    score: int = Field(ge=MIN_SCORE, le=MAX_SCORE)
    comment: str | None = Field(default=None, max_length=500)
    anonymous: bool = False
    # Por defecto, el momento del alta
    rated_at: datetime | None = None


class ValuationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    reservation_id: int
    score: int
    comment: str | None = None
    anonymous: bool
    rated_at: datetime
