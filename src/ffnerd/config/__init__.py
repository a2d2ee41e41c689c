"""Static feed configuration."""

from .feeds import BASE_URL, FEED_PATHS, Feed, FeedSpec, get_feed, iter_feeds

__all__ = [
    "BASE_URL",
    "FEED_PATHS",
    "Feed",
    "FeedSpec",
    "get_feed",
    "iter_feeds",
]
