from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, IDModel


class Invite(IDModel, CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'invites'

    invited_by: str = Field(index=True)
    email: str
    claimed: bool = Field(default=False, index=True)
