from .stremio import (
    ContentIdentifier,
    Episode,
    MetaRecord,
    Stream,
    StremioContentType,
    StremioMetaPreview,
    SubtitleTrack,
)

__all__ = [
    "ContentIdentifier",
    "Episode",
    "MetaRecord",
    "Stream",
    "StremioContentType",
    "StremioMetaPreview",
    "SubtitleTrack",
]
