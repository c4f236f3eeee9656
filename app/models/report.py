from sqlmodel import Field, SQLModel
from app.models.base import IDModel, TimestampModel


class Report(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'reports'

    torrent_id: str = Field(index=True)
    reported_by: str = Field(index=True)
    reason: str
    solved: bool = Field(default=False, index=True)
