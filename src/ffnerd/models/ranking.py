"""Preseason draft ranking records."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.config import ConfigDict


class Ranking(BaseModel):
    player_id: int
    player_name: str
    player_team: str
    player_position: str

    model_config = ConfigDict(frozen=True)


class StandardRanking(Ranking):
    player_overall_rank: int = 0
    player_position_rank: int = 0
    player_bye: int = 0
