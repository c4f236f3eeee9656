from datetime import datetime
from app.schemas.base import CamelModel


class UsernameOut(CamelModel):
    username: str


class UserSummaryOut(CamelModel):
    username: str
    created_at: datetime
