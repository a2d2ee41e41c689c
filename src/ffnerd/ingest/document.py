"""Queryable wrapper around a parsed feed payload."""

from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup, Tag


class FeedNode:
    """One element of a feed document.

    Lookups never raise for missing data: absent attributes and tags read as
    an empty string so decoders can apply their own defaults.
    """

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def name(self) -> str:
        return self._tag.name

    def attr(self, name: str) -> str:
        value = self._tag.get(name.lower())
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def text(self, path: str) -> str:
        """Text of every descendant matching the space-separated tag path."""

        matches = self._tag.select(path.lower())
        return "".join(match.get_text() for match in matches).strip()

    def select(self, tag: str) -> List["FeedNode"]:
        return [FeedNode(found) for found in self._tag.find_all(tag.lower())]

    def __repr__(self) -> str:
        return f"FeedNode({self._tag.name!r}, attrs={dict(self._tag.attrs)!r})"


class FeedDocument(FeedNode):
    """The root of a parsed feed."""


def parse_document(payload: Union[str, bytes]) -> FeedDocument:
    """Parse an XML payload, normalising tag and attribute names to lowercase.

    The upstream feeds are not consistent about case (``playerId`` vs
    ``playerid``), so every lookup in the decoders uses lowercase names.
    """

    soup = BeautifulSoup(payload, "xml")
    for tag in soup.find_all(True):
        tag.name = tag.name.lower()
        tag.attrs = {str(key).lower(): value for key, value in tag.attrs.items()}
    return FeedDocument(soup)
