"""Tests for StremioStreamUseCase and episode selection."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from cinebyarr.application.use_cases.stremio_stream import (
    StremioStreamUseCase,
    select_episode,
)
from cinebyarr.domain.entities.stremio import ContentIdentifier, Episode, Stream


@pytest.fixture()
def use_case(mock_tmdb: AsyncMock, mock_site: AsyncMock) -> StremioStreamUseCase:
    return StremioStreamUseCase(tmdb=mock_tmdb, site=mock_site)


class TestSelectEpisode:
    def test_string_request_matches_int_position(
        self, episodes: list[Episode]
    ) -> None:
        match = select_episode(episodes, "2", "1")
        assert match is episodes[2]

    def test_int_request_matches_string_attribute(
        self, episodes: list[Episode]
    ) -> None:
        assert select_episode(episodes, 1, 2) is episodes[1]

    def test_no_match(self, episodes: list[Episode]) -> None:
        assert select_episode(episodes, "5", "1") is None

    def test_first_match_wins_on_duplicates(self) -> None:
        a = Episode(season="1", episode="1", streams=(Stream(url="https://a"),))
        b = Episode(season="1", episode=1, streams=(Stream(url="https://b"),))
        assert select_episode([a, b], "1", "1") is a


class TestMovie:
    async def test_movie_streams_returned(
        self,
        use_case: StremioStreamUseCase,
        mock_tmdb: AsyncMock,
        mock_site: AsyncMock,
        movie_stream: Stream,
    ) -> None:
        mock_site.movie_streams.return_value = [movie_stream]
        identifier = ContentIdentifier.parse("tmdb/603")

        streams = await use_case.execute(identifier)

        assert streams == [movie_stream]
        mock_tmdb.resolve_title.assert_awaited_once_with(identifier)
        mock_site.movie_streams.assert_awaited_once_with("The Matrix")
        mock_site.episodes.assert_not_awaited()

    async def test_season_without_episode_uses_movie_path(
        self, use_case: StremioStreamUseCase, mock_site: AsyncMock
    ) -> None:
        await use_case.execute(ContentIdentifier.parse("tmdb/1399/1"))

        mock_site.movie_streams.assert_awaited_once()
        mock_site.episodes.assert_not_awaited()

    async def test_unresolved_title_is_empty(
        self,
        use_case: StremioStreamUseCase,
        mock_tmdb: AsyncMock,
        mock_site: AsyncMock,
    ) -> None:
        mock_tmdb.resolve_title.return_value = None

        assert await use_case.execute(ContentIdentifier.parse("tmdb/603")) == []
        mock_site.movie_streams.assert_not_awaited()


class TestEpisode:
    async def test_matching_episode_streams(
        self,
        use_case: StremioStreamUseCase,
        mock_tmdb: AsyncMock,
        mock_site: AsyncMock,
        episodes: list[Episode],
    ) -> None:
        mock_tmdb.resolve_title.return_value = "Game of Thrones"
        mock_site.episodes.return_value = episodes

        streams = await use_case.execute(ContentIdentifier.parse("tmdb/1399/1/1"))

        assert streams == list(episodes[0].streams)
        assert streams[0].subtitles[0].lang == "de"
        mock_site.episodes.assert_awaited_once_with("Game of Thrones")
        mock_site.movie_streams.assert_not_awaited()

    async def test_colon_id_with_positional_episode(
        self,
        use_case: StremioStreamUseCase,
        mock_site: AsyncMock,
        episodes: list[Episode],
    ) -> None:
        mock_site.episodes.return_value = episodes

        streams = await use_case.execute(ContentIdentifier.parse("tmdb:1399:2:1"))

        assert [s.url for s in streams] == ["https://cdn/got/2/1.mp4"]

    async def test_missing_episode_is_empty(
        self,
        use_case: StremioStreamUseCase,
        mock_site: AsyncMock,
        episodes: list[Episode],
    ) -> None:
        mock_site.episodes.return_value = episodes
        assert await use_case.execute(ContentIdentifier.parse("tmdb/1399/9/9")) == []


class TestFailSoft:
    async def test_metadata_exception_is_empty(
        self,
        use_case: StremioStreamUseCase,
        mock_tmdb: AsyncMock,
    ) -> None:
        mock_tmdb.resolve_title.side_effect = RuntimeError("boom")
        assert await use_case.execute(ContentIdentifier.parse("tmdb/603")) == []

    async def test_site_exception_is_empty(
        self,
        use_case: StremioStreamUseCase,
        mock_site: AsyncMock,
    ) -> None:
        mock_site.episodes.side_effect = ValueError("bad markup")
        assert await use_case.execute(ContentIdentifier.parse("tmdb/1399/1/1")) == []
