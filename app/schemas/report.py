from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from app.schemas.base import CamelModel
from app.schemas.torrent import TorrentNameOut, TorrentSummaryOut
from app.schemas.user import UserSummaryOut, UsernameOut


class ReportCreate(BaseModel):
    # Optional so a missing reason reaches the service and answers 400, not 422.
    reason: Optional[str] = None


class ReportDetailOut(CamelModel):
    id: str
    reason: str
    solved: bool
    created_at: datetime
    reported_by: Optional[UserSummaryOut] = None
    torrent: Optional[TorrentSummaryOut] = None


class ReportListItemOut(CamelModel):
    id: str
    reason: str
    solved: bool
    created_at: datetime
    reported_by: Optional[UsernameOut] = None
    torrent: Optional[TorrentNameOut] = None
