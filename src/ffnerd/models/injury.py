"""Injury report records."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Injury(BaseModel):
    week: int = 0
    injury_desc: str = ""
    practice_status_desc: str = ""
    game_status_desc: str = ""
    last_update: Optional[date] = None

    model_config = ConfigDict(frozen=True)


class InjuryReport(BaseModel):
    """One ``injury`` node: the player's identity plus the nested injury."""

    id: int = Field(..., ge=0)
    name: str
    team: str
    position: str
    injury: Injury

    model_config = ConfigDict(frozen=True)
