"""Client settings: API key, endpoint and merge policy."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from ffnerd.config import BASE_URL
from ffnerd.errors import ConfigurationError


logger = logging.getLogger(__name__)

API_KEY_ENV = "FFNERD_API_KEY"
BASE_URL_ENV = "FFNERD_BASE_URL"
TIMEOUT_ENV = "FFNERD_TIMEOUT"
STRICT_MERGE_ENV = "FFNERD_STRICT_MERGE"

DEFAULT_TIMEOUT = 10.0

_TRUE_TOKENS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_TOKENS = {"0", "false", "f", "no", "n", "off"}


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _parse_flag(name: str, raw: object, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_TOKENS:
        return True
    if text in _FALSE_TOKENS:
        return False
    logger.warning("Invalid flag for %s: %s; using default %s", name, raw, default)
    return default


def _env_flag(name: str, default: bool) -> bool:
    return _parse_flag(name, os.getenv(name), default)


@dataclass(frozen=True)
class ClientSettings:
    api_key: Optional[str] = None
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    strict_merge: bool = False

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_key=os.getenv(API_KEY_ENV) or None,
            base_url=os.getenv(BASE_URL_ENV) or BASE_URL,
            timeout=_env_float(TIMEOUT_ENV, DEFAULT_TIMEOUT, clamp_min=0.0),
            strict_merge=_env_flag(STRICT_MERGE_ENV, False),
        )

    @classmethod
    def load(cls, path: Path) -> "ClientSettings":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            api_key=data.get("api_key") or None,
            base_url=data.get("base_url", BASE_URL),
            timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            strict_merge=_parse_flag("strict_merge", data.get("strict_merge"), False),
        )

    def save(self, path: Path) -> None:
        path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                f"API key not set; pass api_key or export {API_KEY_ENV}"
            )
        return self.api_key
