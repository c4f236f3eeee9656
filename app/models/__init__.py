from app.models.base import CreatedAtModel, IDModel, TimestampModel
from app.models.user import User
from app.models.torrent import Torrent
from app.models.progress import Progress
from app.models.invite import Invite
from app.models.torrent_request import TorrentRequest
from app.models.comment import Comment
from app.models.report import Report

__all__ = [
    'IDModel',
    'CreatedAtModel',
    'TimestampModel',
    'User',
    'Torrent',
    'Progress',
    'Invite',
    'TorrentRequest',
    'Comment',
    'Report',
]
