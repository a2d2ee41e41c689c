"""Endpoint table for the Fantasy Football Nerd XML feeds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Mapping, Union


BASE_URL = "http://api.fantasyfootballnerd.com"


class Feed(str, Enum):
    SCHEDULE = "schedule"
    PROJECTIONS = "projections"
    INJURIES = "injuries"
    ALL_PLAYERS = "all_players"
    RANKINGS = "rankings"
    PLAYER = "player"


@dataclass(frozen=True)
class FeedSpec:
    feed: Feed
    path: str
    description: str


_FEEDS: Dict[Feed, FeedSpec] = {
    Feed.SCHEDULE: FeedSpec(
        feed=Feed.SCHEDULE,
        path="ffnScheduleXML.php",
        description="Season schedule",
    ),
    Feed.PROJECTIONS: FeedSpec(
        feed=Feed.PROJECTIONS,
        path="ffnSitStartXML.php",
        description="Weekly sit/start projections",
    ),
    Feed.INJURIES: FeedSpec(
        feed=Feed.INJURIES,
        path="ffnInjuriesXML.php",
        description="Weekly injury reports",
    ),
    Feed.ALL_PLAYERS: FeedSpec(
        feed=Feed.ALL_PLAYERS,
        path="ffnPlayersXML.php",
        description="All active players",
    ),
    Feed.RANKINGS: FeedSpec(
        feed=Feed.RANKINGS,
        path="ffnRankingsXML.php",
        description="Preseason draft rankings",
    ),
    Feed.PLAYER: FeedSpec(
        feed=Feed.PLAYER,
        path="ffnPlayerDetailsXML.php",
        description="Player details and news articles",
    ),
}


def iter_feeds() -> Iterable[FeedSpec]:
    """Return an iterator of all configured feeds."""

    return _FEEDS.values()


def get_feed(feed: Union[Feed, str]) -> FeedSpec:
    """Resolve a feed by enum member or its string value, raising KeyError if unknown."""

    if not isinstance(feed, Feed):
        if not isinstance(feed, str):
            raise TypeError("feed must be a Feed or str")
        try:
            feed = Feed(feed.lower())
        except ValueError:
            raise KeyError(f"No feed configured for {feed!r}") from None
    return _FEEDS[feed]


# Path lookup by feed name; read-only.
FEED_PATHS: Mapping[str, str] = {feed.value: spec.path for feed, spec in _FEEDS.items()}
