"""Player records shared across the feed decoders and the merge step."""

from __future__ import annotations

import math
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from .injury import Injury


class Player(BaseModel):
    id: int = Field(..., ge=0)
    name: str
    position: str
    team: str

    model_config = ConfigDict(frozen=True)


class Article(BaseModel):
    title: str
    source: str
    published: Optional[date] = None

    model_config = ConfigDict(frozen=True)


class PlayerDetail(BaseModel):
    first_name: str
    last_name: str
    team: str
    position: str
    articles: List[Article] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Projection(BaseModel):
    """Weekly point projections for each scoring scenario."""

    week: int = 0
    standard: float = 0.0
    standard_low: float = 0.0
    standard_high: float = 0.0
    ppr: float = 0.0
    ppr_low: float = 0.0
    ppr_high: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator("standard", "standard_low", "standard_high", "ppr", "ppr_low", "ppr_high")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("projection values must be finite")
        return value


class ProjectedPlayer(BaseModel):
    id: int = Field(..., ge=0)
    name: str
    team: str
    position: str
    projected_points: float = 0.0
    rank: int = 0
    projection: Projection = Field(default_factory=Projection)

    model_config = ConfigDict(frozen=True)

    @field_validator("projected_points")
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("projected_points must be finite")
        return value


class MergedPlayer(ProjectedPlayer):
    """A projected player annotated with that week's injury, if any."""

    injured: bool = False
    injury: Optional[Injury] = None
