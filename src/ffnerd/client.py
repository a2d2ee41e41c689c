"""HTTP client exposing one method per feed plus the merged weekly view."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import List, Optional, Tuple, Union

import httpx

from ffnerd.config_loader import ClientSettings
from ffnerd.ingest import (
    ALL_POSITIONS,
    ALL_WEEKS,
    FeedDocument,
    MergeReport,
    decode_injuries,
    decode_player_detail,
    decode_players,
    decode_ppr_rankings,
    decode_projections,
    decode_schedule,
    decode_standard_rankings,
    injuries_url,
    merge_injuries,
    parse_document,
    player_list_url,
    player_url,
    projections_url,
    rankings_url,
    schedule_url,
)
from ffnerd.models import (
    InjuryReport,
    MergedPlayer,
    Player,
    PlayerDetail,
    ProjectedPlayer,
    Ranking,
    ScheduledGame,
    StandardRanking,
)


logger = logging.getLogger(__name__)

_API_KEY_PATTERN = re.compile(r"(apiKey=)[^&]*")

PPR_RANKINGS_LIMIT = 20
STANDARD_RANKINGS_LIMIT = 999


def _redact(url: str) -> str:
    return _API_KEY_PATTERN.sub(r"\1***", url)


class FFNerdClient:
    """Synchronous client for the Fantasy Football Nerd XML feeds.

    Each call fetches and decodes a fresh document; nothing is cached.
    Transport failures surface as :class:`httpx.HTTPError`.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        settings = settings or ClientSettings()
        if api_key is not None:
            settings = replace(settings, api_key=api_key)
        self.settings = settings
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=settings.timeout)

    @classmethod
    def from_env(cls, *, http_client: Optional[httpx.Client] = None) -> "FFNerdClient":
        return cls(settings=ClientSettings.from_env(), http_client=http_client)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "FFNerdClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def _url_kwargs(self) -> dict:
        return {"api_key": self.settings.require_api_key(), "base_url": self.settings.base_url}

    def fetch(self, url: str) -> FeedDocument:
        logger.debug("Fetching %s", _redact(url))
        response = self._http.get(url)
        response.raise_for_status()
        return parse_document(response.content)

    def player_list(self) -> List[Player]:
        return decode_players(self.fetch(player_list_url(**self._url_kwargs)))

    def player_detail(self, player_id: int) -> PlayerDetail:
        return decode_player_detail(self.fetch(player_url(player_id, **self._url_kwargs)))

    def projections(self, week: int, position: object = ALL_POSITIONS) -> List[ProjectedPlayer]:
        url = projections_url(position, week, **self._url_kwargs)
        return decode_projections(self.fetch(url))

    def injuries(self, week: int) -> List[InjuryReport]:
        return decode_injuries(self.fetch(injuries_url(week, **self._url_kwargs)))

    def schedule(self, week: Union[int, str] = ALL_WEEKS) -> List[ScheduledGame]:
        return decode_schedule(self.fetch(schedule_url(**self._url_kwargs)), week)

    def ppr_rankings(
        self,
        position: object = ALL_POSITIONS,
        limit: int = PPR_RANKINGS_LIMIT,
        strength_of_schedule: bool = True,
    ) -> List[Ranking]:
        """PPR draft rankings; the request carries ``ppr=1``.

        Older clients of this API sent ``ppr=1`` from the standard call and
        omitted it here, so the two variants' queries were swapped.
        """

        url = rankings_url(position, limit, True, strength_of_schedule, **self._url_kwargs)
        return decode_ppr_rankings(self.fetch(url))

    def standard_rankings(
        self,
        position: object = ALL_POSITIONS,
        limit: int = STANDARD_RANKINGS_LIMIT,
        strength_of_schedule: bool = False,
    ) -> List[StandardRanking]:
        """Standard-scoring draft rankings; the request omits ``ppr``."""

        url = rankings_url(position, limit, False, strength_of_schedule, **self._url_kwargs)
        return decode_standard_rankings(self.fetch(url))

    def merged_players_with_report(
        self,
        week: int,
        position: object = ALL_POSITIONS,
        *,
        strict: Optional[bool] = None,
    ) -> Tuple[List[MergedPlayer], MergeReport]:
        """Projections for ``week`` annotated with that week's injuries, plus the merge report.

        ``strict`` defaults to ``settings.strict_merge``; when set, an injury
        for a player missing from the projections raises
        :class:`~ffnerd.errors.InjuryMismatchError`. Otherwise such injuries
        are listed in ``MergeReport.orphaned_injuries``.
        """

        if strict is None:
            strict = self.settings.strict_merge
        projections = self.projections(week, position)
        injuries = self.injuries(week)
        merged, report = merge_injuries(projections, injuries, strict=strict)
        logger.info(
            "Merged week %s: %s players, %s injured, %s orphaned injuries",
            week,
            report.total_players,
            report.injured_players,
            len(report.orphaned_injuries),
        )
        return merged, report

    def merged_players(
        self,
        week: int,
        position: object = ALL_POSITIONS,
        *,
        strict: Optional[bool] = None,
    ) -> List[MergedPlayer]:
        merged, _ = self.merged_players_with_report(week, position, strict=strict)
        return merged
