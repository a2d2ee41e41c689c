"""Typed records produced by the feed decoders."""

from .injury import Injury, InjuryReport
from .player import Article, MergedPlayer, Player, PlayerDetail, ProjectedPlayer, Projection
from .ranking import Ranking, StandardRanking
from .schedule import ScheduledGame

__all__ = [
    "Article",
    "Injury",
    "InjuryReport",
    "MergedPlayer",
    "Player",
    "PlayerDetail",
    "ProjectedPlayer",
    "Projection",
    "Ranking",
    "ScheduledGame",
    "StandardRanking",
]
