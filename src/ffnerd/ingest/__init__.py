"""Feed URL building, document parsing, decoding and merging."""

from .document import FeedDocument, FeedNode, parse_document
from .feeds import (
    ALL_WEEKS,
    INJURY_MAP,
    INJURY_PLAYER_MAP,
    PROJECTIONS_MAP,
    decode_articles,
    decode_injuries,
    decode_player_detail,
    decode_players,
    decode_ppr_rankings,
    decode_projections,
    decode_schedule,
    decode_standard_rankings,
)
from .merge import MergeReport, merge_injuries
from .urls import (
    ALL_POSITIONS,
    build_url,
    injuries_url,
    player_list_url,
    player_url,
    projections_url,
    rankings_url,
    schedule_url,
)

__all__ = [
    "ALL_POSITIONS",
    "ALL_WEEKS",
    "FeedDocument",
    "FeedNode",
    "INJURY_MAP",
    "INJURY_PLAYER_MAP",
    "MergeReport",
    "PROJECTIONS_MAP",
    "build_url",
    "decode_articles",
    "decode_injuries",
    "decode_player_detail",
    "decode_players",
    "decode_ppr_rankings",
    "decode_projections",
    "decode_schedule",
    "decode_standard_rankings",
    "injuries_url",
    "merge_injuries",
    "parse_document",
    "player_list_url",
    "player_url",
    "projections_url",
    "rankings_url",
    "schedule_url",
]
