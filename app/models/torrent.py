from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, IDModel


class Torrent(IDModel, CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'torrents'

    info_hash: str = Field(index=True, unique=True, max_length=40)
    name: str
    description: str = ''
    uploaded_by: str = Field(index=True)
