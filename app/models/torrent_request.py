from typing import Optional
from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, IDModel


class TorrentRequest(IDModel, CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'requests'

    title: str
    body: str = ''
    created_by: str = Field(index=True)
    fulfilled_by: Optional[str] = Field(default=None, index=True)
