"""Table-driven decoders that turn feed documents into typed records."""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, time
from typing import Callable, List, Mapping, Optional, TypeVar, Union

from ffnerd.errors import FeedDecodeError
from ffnerd.models import (
    Article,
    Injury,
    InjuryReport,
    Player,
    PlayerDetail,
    ProjectedPlayer,
    Projection,
    Ranking,
    ScheduledGame,
    StandardRanking,
)

from .document import FeedDocument, FeedNode


logger = logging.getLogger(__name__)

# model field -> xml tag inside the player's <projections> block
PROJECTIONS_MAP: Mapping[str, str] = {
    "standard": "standard",
    "standard_low": "standardlow",
    "standard_high": "standardhigh",
    "ppr": "ppr",
    "ppr_low": "pprlow",
    "ppr_high": "pprhigh",
}

INJURY_PLAYER_MAP: Mapping[str, str] = {
    "id": "playerid",
    "name": "playername",
    "team": "team",
    "position": "position",
}

INJURY_MAP: Mapping[str, str] = {
    "week": "week",
    "injury_desc": "injurydesc",
    "practice_status_desc": "practicestatusdesc",
    "game_status_desc": "gamestatusdesc",
    "last_update": "lastupdate",
}

PLAYER_MAP: Mapping[str, str] = {
    "id": "playerid",
    "name": "name",
    "position": "position",
    "team": "team",
}

PLAYER_DETAIL_MAP: Mapping[str, str] = {
    "first_name": "firstname",
    "last_name": "lastname",
    "team": "team",
    "position": "position",
}

ARTICLE_MAP: Mapping[str, str] = {
    "title": "title",
    "source": "source",
    "published": "published",
}

GAME_MAP: Mapping[str, str] = {
    "id": "gameid",
    "week": "week",
    "date": "gamedate",
    "home": "hometeam",
    "away": "awayteam",
    "time": "gametime",
}

RANKING_MAP: Mapping[str, str] = {
    "player_id": "playerid",
    "player_name": "name",
    "player_team": "team",
    "player_position": "position",
}

STANDARD_RANKING_MAP: Mapping[str, str] = {
    **RANKING_MAP,
    "player_overall_rank": "overallrank",
    "player_position_rank": "positionrank",
    "player_bye": "byeweek",
}

ALL_WEEKS = "all"

_INT_PATTERN = re.compile(r"^\s*([-+]?\d+)")
_ID_PATTERN = re.compile(r"^\s*\+?(\d+)")
_FLOAT_PATTERN = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")
_TIME_ZONE_SUFFIX = re.compile(r"\s*\b(?:[ECMP][SD]?T)\s*$", re.IGNORECASE)

_DATETIME_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y-%m-%d %I:%M %p",
    "%a, %d %b %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M:%S %Z",
    "%B %d, %Y",
    "%b %d, %Y",
)

_TIME_FORMATS = ("%I:%M %p", "%I:%M%p", "%I %p", "%H:%M:%S", "%H:%M")

RecordT = TypeVar("RecordT")


def _parse_int(raw: str) -> int:
    match = _INT_PATTERN.match(raw)
    return int(match.group(1)) if match else 0


def _parse_id(raw: str) -> int:
    match = _ID_PATTERN.match(raw)
    return int(match.group(1)) if match else 0


def _parse_float(raw: str) -> float:
    match = _FLOAT_PATTERN.match(raw)
    if not match:
        return 0.0
    value = float(match.group(1))
    # overflow such as "1e999" parses to inf
    return value if math.isfinite(value) else 0.0


def _parse_datetime(raw: str) -> Optional[datetime]:
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"unrecognised date {raw!r}")


def _parse_date(raw: str) -> Optional[date]:
    parsed = _parse_datetime(raw)
    return parsed.date() if parsed is not None else None


def _parse_time(raw: str) -> Optional[time]:
    text = _TIME_ZONE_SUFFIX.sub("", raw.strip())
    if not text:
        return None
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(text.upper(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"unrecognised time {raw!r}")


def _convert(
    feed: str,
    field: str,
    raw: str,
    parser: Callable[[str], RecordT],
    *,
    record: Optional[str] = None,
) -> RecordT:
    try:
        return parser(raw)
    except ValueError:
        raise FeedDecodeError(feed, field, raw, record=record) from None


def _read_attrs(node: FeedNode, mapping: Mapping[str, str]) -> dict[str, str]:
    return {field: node.attr(xml) for field, xml in mapping.items()}


def _read_text(node: FeedNode, mapping: Mapping[str, str]) -> dict[str, str]:
    return {field: node.text(xml) for field, xml in mapping.items()}


def _decode_all(
    doc: FeedDocument,
    tag: str,
    decode: Callable[[FeedNode], RecordT],
) -> List[RecordT]:
    records = [decode(node) for node in doc.select(tag)]
    logger.debug("Decoded %d <%s> nodes", len(records), tag)
    return records


def decode_player(node: FeedNode) -> Player:
    data: dict[str, Union[str, int]] = _read_attrs(node, PLAYER_MAP)
    data["id"] = _parse_id(node.attr(PLAYER_MAP["id"]))
    return Player(**data)


def decode_players(doc: FeedDocument) -> List[Player]:
    return _decode_all(doc, "player", decode_player)


def decode_article(node: FeedNode) -> Article:
    data = _read_text(node, ARTICLE_MAP)
    published = _convert(
        "player",
        "published",
        data.pop("published"),
        _parse_date,
        record=data["title"] or None,
    )
    return Article(published=published, **data)


def decode_articles(doc: FeedDocument) -> List[Article]:
    return _decode_all(doc, "article", decode_article)


def decode_player_detail(doc: FeedDocument) -> PlayerDetail:
    """Decode the single ``playerdetails`` block plus every ``article``."""

    data = {
        field: doc.text(f"playerdetails {xml}")
        for field, xml in PLAYER_DETAIL_MAP.items()
    }
    return PlayerDetail(articles=decode_articles(doc), **data)


def decode_projected_player(node: FeedNode) -> ProjectedPlayer:
    scenarios = {
        field: _parse_float(node.text(f"projections {xml}"))
        for field, xml in PROJECTIONS_MAP.items()
    }
    projection = Projection(week=_parse_int(node.attr("week")), **scenarios)
    return ProjectedPlayer(
        id=_parse_id(node.attr("playerid")),
        name=node.attr("name"),
        team=node.attr("team"),
        position=node.attr("position"),
        projected_points=_parse_float(node.attr("projectedpoints")),
        rank=_parse_int(node.attr("rank")),
        projection=projection,
    )


def decode_projections(doc: FeedDocument) -> List[ProjectedPlayer]:
    return _decode_all(doc, "player", decode_projected_player)


def decode_injury_report(node: FeedNode) -> InjuryReport:
    player = _read_text(node, INJURY_PLAYER_MAP)
    injury: dict[str, object] = _read_text(node, INJURY_MAP)
    player_id = _parse_id(player.pop("id"))
    injury["week"] = _parse_int(str(injury["week"]))
    injury["last_update"] = _convert(
        "injuries",
        "lastupdate",
        str(injury["last_update"]),
        _parse_date,
        record=f"playerid={player_id}",
    )
    return InjuryReport(id=player_id, injury=Injury(**injury), **player)


def decode_injuries(doc: FeedDocument) -> List[InjuryReport]:
    return _decode_all(doc, "injury", decode_injury_report)


def decode_game(node: FeedNode) -> ScheduledGame:
    raw = _read_attrs(node, GAME_MAP)
    game_id = _parse_id(raw["id"])
    context = f"gameid={game_id}"
    return ScheduledGame(
        id=game_id,
        week=_parse_int(raw["week"]),
        date=_convert("schedule", "gamedate", raw["date"], _parse_datetime, record=context),
        home=raw["home"],
        away=raw["away"],
        time=_convert("schedule", "gametime", raw["time"], _parse_time, record=context),
    )


def decode_schedule(doc: FeedDocument, week: Union[int, str] = ALL_WEEKS) -> List[ScheduledGame]:
    """Decode every ``game``; keep only ``week``'s games unless ``week`` is ``"all"``."""

    games = _decode_all(doc, "game", decode_game)
    if isinstance(week, str) and week.lower() == ALL_WEEKS:
        return games
    return [game for game in games if game.week == int(week)]


def decode_ppr_ranking(node: FeedNode) -> Ranking:
    data: dict[str, Union[str, int]] = _read_attrs(node, RANKING_MAP)
    data["player_id"] = _parse_id(str(data["player_id"]))
    return Ranking(**data)


def decode_ppr_rankings(doc: FeedDocument) -> List[Ranking]:
    return _decode_all(doc, "player", decode_ppr_ranking)


def decode_standard_ranking(node: FeedNode) -> StandardRanking:
    data: dict[str, Union[str, int]] = _read_attrs(node, STANDARD_RANKING_MAP)
    data["player_id"] = _parse_id(str(data["player_id"]))
    for field in ("player_overall_rank", "player_position_rank", "player_bye"):
        data[field] = _parse_int(str(data[field]))
    return StandardRanking(**data)


def decode_standard_rankings(doc: FeedDocument) -> List[StandardRanking]:
    return _decode_all(doc, "player", decode_standard_ranking)
