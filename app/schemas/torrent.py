from datetime import datetime
from app.schemas.base import CamelModel


class TorrentNameOut(CamelModel):
    name: str


class TorrentSummaryOut(CamelModel):
    name: str
    description: str
    info_hash: str
    created_at: datetime
