"""Exception types raised by the ffnerd client."""

from __future__ import annotations

from typing import Optional


class FFNerdError(Exception):
    """Base class for library errors."""


class ConfigurationError(FFNerdError):
    """Raised when a feed is requested before an API key is configured."""


class FeedDecodeError(FFNerdError, ValueError):
    def __init__(
        self,
        feed: str,
        field: str,
        raw: str,
        *,
        record: Optional[str] = None,
    ) -> None:
        self.feed = feed
        self.field = field
        self.raw = raw
        self.record = record
        where = f" (record {record})" if record else ""
        super().__init__(f"{feed}: cannot parse {field}={raw!r}{where}")


class InjuryMismatchError(FFNerdError, LookupError):
    """An injury report references a player missing from the week's projections."""

    def __init__(self, player_id: int, name: str, week: int) -> None:
        self.player_id = player_id
        self.name = name
        self.week = week
        super().__init__(
            f"Injury for player_id={player_id} ({name!r}) has no week {week} projection"
        )
