from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel
from pydantic.config import ConfigDict


class ScheduledGame(BaseModel):
    id: int
    week: int
    # Module-qualified types: the ``date``/``time`` field names shadow the bare class names.
    date: Optional[dt.datetime] = None
    home: str
    away: str
    time: Optional[dt.time] = None

    model_config = ConfigDict(frozen=True)
