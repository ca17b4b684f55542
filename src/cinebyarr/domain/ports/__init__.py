from .cache import CachePort, cache_key
from .content_site import ContentSitePort
from .tmdb import TmdbClientPort

__all__ = [
    "CachePort",
    "cache_key",
    "ContentSitePort",
    "TmdbClientPort",
]
