"""Client library for the Fantasy Football Nerd XML API."""

from .client import FFNerdClient
from .config_loader import ClientSettings
from .errors import ConfigurationError, FeedDecodeError, FFNerdError, InjuryMismatchError

__all__ = [
    "ClientSettings",
    "ConfigurationError",
    "FFNerdClient",
    "FFNerdError",
    "FeedDecodeError",
    "InjuryMismatchError",
]
