"""Aggregate counts over the site's own collections.

These are the authoritative half of the admin stats snapshot: they are
computed as one unit and any failure fails the whole set.
"""

from dataclasses import dataclass

from loguru import logger
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from app.core.errors import InternalFailure
from app.models.comment import Comment
from app.models.invite import Invite
from app.models.progress import Progress
from app.models.torrent import Torrent
from app.models.torrent_request import TorrentRequest
from app.models.user import User


@dataclass(frozen=True)
class LocalCounts:
    registered_users: int
    banned_users: int
    uploaded_torrents: int
    completed_downloads: int
    total_invites_sent: int
    invites_accepted: int
    total_requests: int
    filled_requests: int
    total_comments: int


COUNT_QUERIES = {
    'registered_users': (User, ()),
    'banned_users': (User, (col(User.banned).is_(True),)),
    'uploaded_torrents': (Torrent, ()),
    'completed_downloads': (Progress, (col(Progress.left) == 0,)),
    'total_invites_sent': (Invite, ()),
    'invites_accepted': (Invite, (col(Invite.claimed).is_(True),)),
    'total_requests': (TorrentRequest, ()),
    'filled_requests': (TorrentRequest, (col(TorrentRequest.fulfilled_by).is_not(None),)),
    'total_comments': (Comment, ()),
}


def count(session: Session, model, *criteria) -> int:
    statement = select(func.count()).select_from(model)
    if criteria:
        statement = statement.where(*criteria)
    result = session.exec(statement).one()
    return int(result or 0)


def count_all(session: Session) -> LocalCounts:
    try:
        values = {name: count(session, model, *criteria) for name, (model, criteria) in COUNT_QUERIES.items()}
    except SQLAlchemyError as exc:
        logger.error('stats.count_failed', error=str(exc))
        raise InternalFailure(f'Could not compute site counts: {exc}') from exc
    return LocalCounts(**values)
