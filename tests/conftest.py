"""Shared test fixtures for Cinebyarr test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from cinebyarr.domain.entities.stremio import Episode, Stream, SubtitleTrack
from cinebyarr.infrastructure.cache import MemoryCacheAdapter

# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------

SEARCH_HTML = """\
<html><body>
<div class="results">
  <div class="result"><a href="/movie/the-matrix">The Matrix</a></div>
  <div class="result"><a href="/movie/the-matrix-reloaded">The Matrix Reloaded</a></div>
</div>
</body></html>
"""

EMPTY_SEARCH_HTML = """\
<html><body><div class="results"><p>No results</p></div></body></html>
"""

MOVIE_HTML = """\
<html><body>
<div class="player">
  <iframe src="https://playerX/603"></iframe>
</div>
</body></html>
"""

SERIES_HTML = """\
<html><body>
<section id="season-1">
  <div class="episode" data-episode="1">
    <iframe src="https://player/got/1/1"></iframe>
    <track kind="subtitles" src="https://subs/got-1-1-de.vtt" srclang="de">
  </div>
  <div class="episode" data-episode="2">
    <iframe src="https://player/got/1/2"></iframe>
  </div>
</section>
<section id="season-2">
  <div class="episode" data-episode="1">
    <video><source src="https://cdn/got/2/1.mp4"></video>
  </div>
</section>
</body></html>
"""


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def movie_stream() -> Stream:
    return Stream(url="https://playerX/603")


@pytest.fixture()
def episodes() -> list[Episode]:
    """Two seasons of a series as the extractor would return them."""
    return [
        Episode(
            season="1",
            episode="1",
            streams=(
                Stream(
                    url="https://player/got/1/1",
                    subtitles=(SubtitleTrack(url="https://subs/1-1.vtt", lang="de"),),
                ),
            ),
        ),
        Episode(season="1", episode="2", streams=(Stream(url="https://player/got/1/2"),)),
        Episode(season="2", episode=1, streams=(Stream(url="https://cdn/got/2/1.mp4"),)),
    ]


# ---------------------------------------------------------------------------
# Cache fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
async def memory_cache() -> MemoryCacheAdapter:
    """Real in-memory cache, opened for the duration of the test."""
    cache = MemoryCacheAdapter()
    async with cache:
        yield cache


@pytest.fixture()
def mock_cache() -> AsyncMock:
    """Mock CachePort (always misses)."""
    cache = AsyncMock()
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock()
    cache.delete = AsyncMock(return_value=True)
    cache.exists = AsyncMock(return_value=False)
    cache.clear = AsyncMock()
    cache.aclose = AsyncMock()
    return cache


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_tmdb() -> AsyncMock:
    """Mock TmdbClientPort."""
    tmdb = AsyncMock()
    tmdb.resolve_title = AsyncMock(return_value="The Matrix")
    tmdb.poster_and_description = AsyncMock(return_value=(None, ""))
    tmdb.trending_movies = AsyncMock(return_value=[])
    tmdb.trending_tv = AsyncMock(return_value=[])
    tmdb.search_movies = AsyncMock(return_value=[])
    tmdb.search_tv = AsyncMock(return_value=[])
    return tmdb


@pytest.fixture()
def mock_site() -> AsyncMock:
    """Mock ContentSitePort."""
    site = AsyncMock()
    site.locate = AsyncMock(return_value="https://www.cineby.app/movie/the-matrix")
    site.movie_streams = AsyncMock(return_value=[])
    site.episodes = AsyncMock(return_value=[])
    return site


@pytest.fixture()
def search_html() -> str:
    return SEARCH_HTML


@pytest.fixture()
def empty_search_html() -> str:
    return EMPTY_SEARCH_HTML


@pytest.fixture()
def movie_html() -> str:
    return MOVIE_HTML


@pytest.fixture()
def series_html() -> str:
    return SERIES_HTML
