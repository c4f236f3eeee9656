from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, IDModel


class Comment(IDModel, CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'comments'

    user_id: str = Field(index=True)
    parent_type: str = Field(index=True)
    parent_id: str = Field(index=True)
    comment: str
