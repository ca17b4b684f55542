"""Markup extraction for Cineby content pages.

Pure functions over :class:`HtmlNode` trees without I/O or caching.

Movie pages embed one or more players::

    <iframe src="https://player/1"></iframe>
    <video><source src="https://cdn/1.mp4">
      <track kind="subtitles" src="/subs/de.vtt" srclang="de">
    </video>

Series pages nest episodes inside season containers::

    <div id="season-1">
      <div class="episode" data-episode="1"><iframe src="..."></iframe></div>
    </div>
"""

from __future__ import annotations

from cinebyarr.domain.entities.stremio import Episode, Stream, SubtitleTrack
from cinebyarr.domain.policies import subtitle_language
from cinebyarr.infrastructure.common.html_selectors import (
    HtmlNode,
    extract_attr,
    select_items,
)

PLAYER_SELECTOR = "iframe, video"
SOURCE_SELECTOR = "source"
SUBTITLE_SELECTOR = 'track[kind="subtitles"]'
SEASON_SELECTOR = '[id^="season-"]'
EPISODE_SELECTOR = ".episode"

_SEASON_PREFIX = "season-"


def extract_subtitles(element: HtmlNode) -> tuple[SubtitleTrack, ...]:
    """Subtitle tracks nested in *element*, in document order.

    Tracks without a ``src`` are skipped.
    """
    tracks: list[SubtitleTrack] = []
    for track in element.select(SUBTITLE_SELECTOR):
        src = track.attr("src")
        if not src:
            continue
        tracks.append(SubtitleTrack(url=src, lang=subtitle_language(track.attr("srclang"))))
    return tuple(tracks)


def player_source(player: HtmlNode) -> str | None:
    """Own ``src`` of a player element, else the nested ``<source>``'s."""
    return extract_attr(player, "", "src") or extract_attr(
        player, SOURCE_SELECTOR, "src"
    )


def extract_movie_streams(document: HtmlNode) -> list[Stream]:
    """One native stream per player element with a resolvable source."""
    streams: list[Stream] = []
    for player in select_items(document, PLAYER_SELECTOR):
        src = player_source(player)
        if not src:
            continue
        streams.append(Stream(url=src, subtitles=extract_subtitles(player)))
    return streams


def season_number(container: HtmlNode) -> str:
    """Season number from a ``season-<N>`` container id."""
    return (container.attr("id") or "").replace(_SEASON_PREFIX, "", 1)


def episode_source(episode: HtmlNode) -> str | None:
    """First player's ``src`` within an episode, else the first ``<source>``'s."""
    return extract_attr(episode, PLAYER_SELECTOR, "src", SOURCE_SELECTOR)


def extract_episodes(document: HtmlNode) -> list[Episode]:
    """Episodes in markup order: seasons as encountered, then episodes.

    No numeric re-sort is applied. Episodes without a resolvable source
    are dropped.
    """
    episodes: list[Episode] = []
    for container in select_items(document, SEASON_SELECTOR):
        season = season_number(container)
        for position, element in enumerate(
            container.select(EPISODE_SELECTOR), start=1
        ):
            src = episode_source(element)
            if not src:
                continue
            episodes.append(
                Episode(
                    season=season,
                    episode=element.data("episode") or position,
                    streams=(Stream(url=src, subtitles=extract_subtitles(element)),),
                )
            )
    return episodes
