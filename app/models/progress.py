from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel


class Progress(IDModel, TimestampModel, SQLModel, table=True):
    """Per-user transfer totals for one torrent, as announced to the tracker."""

    __tablename__ = 'progress'

    info_hash: str = Field(index=True, max_length=40)
    user_id: str = Field(index=True)
    uploaded: int = 0
    downloaded: int = 0
    left: int = Field(default=0, index=True)
