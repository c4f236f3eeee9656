"""Client for the tracker's plain-text ``/stats`` endpoint.

The tracker answers with newline-separated lines::

    <peer count>
    <seed count>
    opentracker serving <n> torrents

Anything else is treated as a failed scrape.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

import httpx

from app.core.config import settings

ACTIVE_TORRENTS_PATTERN = re.compile(r'serving (\d+) torrents')
_COUNT_PATTERN = re.compile(r'\d+')


class ScrapeError(Exception):
    """The tracker could not be reached or answered with something unusable."""


@dataclass(frozen=True)
class TrackerStats:
    peers: int
    seeds: int
    leechers: int
    active_torrents: int


def _parse_count(line: str, label: str) -> int:
    value = line.strip()
    if not _COUNT_PATTERN.fullmatch(value):
        raise ScrapeError(f'Tracker {label} line is not a count: {value!r}')
    return int(value)


def parse_stats_body(body: str) -> TrackerStats:
    lines = body.split('\n')
    if len(lines) < 3:
        raise ScrapeError(f'Tracker stats body has {len(lines)} line(s), expected 3')
    peers = _parse_count(lines[0], 'peer')
    seeds = _parse_count(lines[1], 'seed')
    match = ACTIVE_TORRENTS_PATTERN.search(lines[2])
    if not match:
        raise ScrapeError(f'Tracker stats body has no active torrent count: {lines[2]!r}')
    # Not clamped: a negative value means the tracker's own numbers disagree.
    return TrackerStats(
        peers=peers,
        seeds=seeds,
        leechers=peers - seeds,
        active_torrents=int(match.group(1)),
    )


class TrackerScrapeClient:
    def __init__(
        self,
        base_url: str,
        *,
        stats_path: str = '/stats',
        timeout: float = 3.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip('/')
        self._stats_path = '/' + stats_path.lstrip('/')
        self._timeout = timeout
        self._transport = transport

    @property
    def stats_url(self) -> str:
        return f'{self._base_url}{self._stats_path}'

    def fetch_stats(self) -> TrackerStats:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self.stats_url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ScrapeError(f'Tracker unreachable at {self.stats_url}: {exc!r}') from exc
        if not response.is_success:
            raise ScrapeError(f'Error performing tracker scrape: {response.status_code} {response.text}')
        return parse_stats_body(response.text)


def get_tracker_client() -> TrackerScrapeClient:
    return TrackerScrapeClient(
        settings.TRACKER_URL,
        stats_path=settings.TRACKER_STATS_PATH,
        timeout=settings.TRACKER_TIMEOUT_SECONDS,
    )
