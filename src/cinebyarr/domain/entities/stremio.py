"""Domain entities for the Cineby Stremio addon.

Pure value objects without framework dependencies or I/O.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal

StremioContentType = Literal["movie", "series"]

DEFAULT_LANGUAGE = "en"
STREAM_LABEL = "Cineby"
NATIVE_REL = "native"

_ID_SEPARATORS = re.compile(r"[/:]")


@dataclass(frozen=True)
class ContentIdentifier:
    """Structured catalog reference.

    Parsed from a raw Stremio id. Both the slash form used by the addon's
    own catalog (``tmdb/603``, ``tmdb/1399/1/1``) and the colon form used by
    Stremio (``tmdb:1399:1:1``, ``tt0944947:1:1``) are accepted.
    Season and episode are kept verbatim as strings.
    """

    provider: str
    id: str
    season: str | None = None
    episode: str | None = None

    @classmethod
    def parse(cls, raw: str) -> ContentIdentifier | None:
        """Parse a raw id, returning None when it has no usable id part."""
        parts = [p for p in _ID_SEPARATORS.split(raw.strip()) if p]
        if not parts:
            return None

        # IMDb ids carry no provider tag: tt0944947[:season:episode]
        if parts[0].startswith("tt"):
            provider, provider_id, rest = "imdb", parts[0], parts[1:]
        else:
            if len(parts) < 2:
                return None
            provider, provider_id, rest = parts[0], parts[1], parts[2:]

        season = rest[0] if len(rest) >= 1 else None
        episode = rest[1] if len(rest) >= 2 else None
        return cls(provider=provider, id=provider_id, season=season, episode=episode)

    @property
    def is_series_lookup(self) -> bool:
        """True when the metadata lookup must use the TV endpoint."""
        return self.provider in ("tmdb", "imdb") and bool(self.season)

    @property
    def is_episode(self) -> bool:
        """True when both season and episode are present."""
        return self.season is not None and self.episode is not None


@dataclass(frozen=True)
class SubtitleTrack:
    """Subtitle track attached to a player element."""

    url: str
    lang: str = DEFAULT_LANGUAGE

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "lang": self.lang}


@dataclass(frozen=True)
class Stream:
    """One playable source discovered on a content page."""

    url: str
    title: str = STREAM_LABEL
    lang: str = DEFAULT_LANGUAGE
    rel: tuple[str, ...] = (NATIVE_REL,)
    subtitles: tuple[SubtitleTrack, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Render the Stremio stream JSON object."""
        return {
            "title": self.title,
            "url": self.url,
            "lang": self.lang,
            "rel": list(self.rel),
            "subtitles": [s.to_dict() for s in self.subtitles],
        }


@dataclass(frozen=True)
class Episode:
    """Streams for one episode.

    ``season`` is the suffix of the ``season-<N>`` container id.
    ``episode`` is the raw ``data-episode`` value, or the 1-based position
    within the season when the attribute is missing.
    """

    season: str
    episode: str | int
    streams: tuple[Stream, ...] = ()


@dataclass(frozen=True)
class MetaRecord:
    """Stremio meta object returned by the meta handler."""

    id: str
    type: StremioContentType
    name: str
    poster: str | None = None
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "poster": self.poster,
            "description": self.description,
        }


@dataclass(frozen=True)
class StremioMetaPreview:
    """Stremio catalog item (MetaPreview object)."""

    id: str  # "tmdb:603"
    type: StremioContentType
    name: str
    poster: str = ""
    description: str = ""
    release_info: str = ""  # Year, e.g. "1999"
    imdb_rating: str = ""
    genres: list[str] = field(default_factory=list)
