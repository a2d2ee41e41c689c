"""Request URL builders for each feed."""

from __future__ import annotations

from typing import Mapping, Optional, Union

import httpx

from ffnerd.config import BASE_URL, Feed, get_feed
from ffnerd.errors import ConfigurationError


ParamValue = Union[str, int]

ALL_POSITIONS = "all"


def _position_code(position: object) -> str:
    return str(position).upper()


def build_url(
    feed: Union[Feed, str],
    params: Optional[Mapping[str, ParamValue]] = None,
    *,
    api_key: Optional[str],
    base_url: str = BASE_URL,
) -> str:
    """Return the request URL for ``feed`` with ``apiKey`` as the first parameter.

    Remaining parameters keep the caller's order; values are stringified and
    percent-encoded.
    """

    spec = get_feed(feed)
    if not api_key:
        raise ConfigurationError(f"API key not set; cannot build {spec.feed.value} URL")
    pairs = [("apiKey", str(api_key))]
    pairs.extend((key, str(value)) for key, value in (params or {}).items())
    query = httpx.QueryParams(pairs)
    return f"{base_url.rstrip('/')}/{spec.path}?{query}"


def player_url(player_id: int, *, api_key: Optional[str], base_url: str = BASE_URL) -> str:
    return build_url(Feed.PLAYER, {"playerId": player_id}, api_key=api_key, base_url=base_url)


def projections_url(
    position: object,
    week: int,
    *,
    api_key: Optional[str],
    base_url: str = BASE_URL,
) -> str:
    return build_url(
        Feed.PROJECTIONS,
        {"week": week, "position": _position_code(position)},
        api_key=api_key,
        base_url=base_url,
    )


def injuries_url(week: int, *, api_key: Optional[str], base_url: str = BASE_URL) -> str:
    return build_url(Feed.INJURIES, {"week": week}, api_key=api_key, base_url=base_url)


def player_list_url(*, api_key: Optional[str], base_url: str = BASE_URL) -> str:
    return build_url(Feed.ALL_PLAYERS, api_key=api_key, base_url=base_url)


def schedule_url(*, api_key: Optional[str], base_url: str = BASE_URL) -> str:
    return build_url(Feed.SCHEDULE, api_key=api_key, base_url=base_url)


def rankings_url(
    position: object,
    limit: int,
    ppr: bool,
    strength_of_schedule: bool,
    *,
    api_key: Optional[str],
    base_url: str = BASE_URL,
) -> str:
    params: dict[str, ParamValue] = {
        "position": _position_code(position),
        "sos": 1 if strength_of_schedule else 0,
        "limit": limit,
    }
    if ppr:
        params["ppr"] = 1
    return build_url(Feed.RANKINGS, params, api_key=api_key, base_url=base_url)
