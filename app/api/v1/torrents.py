from typing import Optional
from fastapi import APIRouter, Body, Depends, Response, status
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User
from app.schemas.report import ReportCreate
from app.services.auth_service import get_current_user
from app.services.report_service import create_report

router = APIRouter(prefix='/torrents', tags=['torrents'])


@router.post('/{info_hash}/report', status_code=status.HTTP_200_OK, response_class=Response)
def report_torrent_endpoint(
    info_hash: str,
    payload: Optional[ReportCreate] = Body(default=None),
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> Response:
    create_report(session, info_hash, user.id, payload.reason if payload else None)
    return Response(status_code=status.HTTP_200_OK)
