from typing import Literal, Union
from app.schemas.base import CamelModel

UNKNOWN = '?'

ScrapeValue = Union[int, Literal['?']]


class StatsSnapshotOut(CamelModel):
    registered_users: int
    banned_users: int
    uploaded_torrents: int
    completed_downloads: int
    total_invites_sent: int
    invites_accepted: int
    total_requests: int
    filled_requests: int
    total_comments: int

    peers: ScrapeValue
    seeds: ScrapeValue
    leechers: ScrapeValue
    active_torrents: ScrapeValue
