from typing import Optional
from loguru import logger
from sqlmodel import Session, col, select
from app.core.config import settings
from app.core.errors import InvalidInput, NotFound
from app.models.enums import UserRole
from app.models.report import Report
from app.models.torrent import Torrent
from app.models.user import User
from app.schemas.report import ReportDetailOut, ReportListItemOut
from app.schemas.torrent import TorrentNameOut, TorrentSummaryOut
from app.schemas.user import UserSummaryOut, UsernameOut
from app.services.authz import requires_role
from app.services.pagination import page_in_range, paginate
from app.services.torrent_service import get_torrent_by_info_hash


def create_report(session: Session, info_hash: str, reporter_id: str, reason: Optional[str]) -> Report:
    """Flag a torrent for moderation. Any authenticated user may report."""
    if reason is None or not reason.strip():
        raise InvalidInput('Request must include reason')

    torrent = get_torrent_by_info_hash(session, info_hash)
    if not torrent:
        raise NotFound('Torrent with that info hash does not exist')

    record = Report(torrent_id=torrent.id, reported_by=reporter_id, reason=reason, solved=False)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.info('reports.created', report_id=record.id, torrent_id=torrent.id, reported_by=reporter_id)
    return record


def get_report(session: Session, report_id: str) -> Optional[Report]:
    return session.exec(select(Report).where(Report.id == report_id)).first()


@requires_role(UserRole.ADMIN, action='view a report')
def fetch_report(session: Session, report_id: str) -> ReportDetailOut:
    record = get_report(session, report_id)
    if not record:
        raise NotFound('Report could not be found')

    reporter = session.get(User, record.reported_by)
    torrent = session.get(Torrent, record.torrent_id)
    return ReportDetailOut(
        id=record.id,
        reason=record.reason,
        solved=record.solved,
        created_at=record.created_at,
        reported_by=(
            UserSummaryOut(username=reporter.username, created_at=reporter.created_at) if reporter else None
        ),
        torrent=(
            TorrentSummaryOut(
                name=torrent.name,
                description=torrent.description,
                info_hash=torrent.info_hash,
                created_at=torrent.created_at,
            )
            if torrent
            else None
        ),
    )


@requires_role(UserRole.ADMIN, action='view reports')
def list_open_reports(session: Session, page: int, page_size: Optional[int] = None) -> list[ReportListItemOut]:
    """Unsolved reports, newest first, with the reporter and torrent joined in when they still exist."""
    page_size = page_size or settings.REPORTS_PAGE_SIZE
    if not page_in_range(page, page_size):
        return []
    statement = (
        select(Report, User.username, Torrent.name)
        .outerjoin(User, col(User.id) == col(Report.reported_by))
        .outerjoin(Torrent, col(Torrent.id) == col(Report.torrent_id))
        .where(col(Report.solved).is_(False))
        .order_by(col(Report.created_at).desc(), col(Report.id).desc())
    )
    statement = paginate(statement, page, page_size)
    return [
        ReportListItemOut(
            id=record.id,
            reason=record.reason,
            solved=record.solved,
            created_at=record.created_at,
            reported_by=UsernameOut(username=username) if username is not None else None,
            torrent=TorrentNameOut(name=torrent_name) if torrent_name is not None else None,
        )
        for record, username, torrent_name in session.exec(statement).all()
    ]


@requires_role(UserRole.ADMIN, action='resolve a report')
def resolve_report(session: Session, report_id: str) -> None:
    record = get_report(session, report_id)
    if not record:
        logger.info('reports.resolve_missing', report_id=report_id)
        return
    if record.solved:
        return
    record.solved = True
    session.add(record)
    session.commit()
    logger.info('reports.resolved', report_id=report_id)
