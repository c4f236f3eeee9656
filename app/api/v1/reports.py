from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User
from app.schemas.report import ReportDetailOut, ReportListItemOut
from app.services.auth_service import get_current_user
from app.services.pagination import parse_page
from app.services.report_service import fetch_report, list_open_reports, resolve_report

router = APIRouter(prefix='/reports', tags=['reports'])


@router.get('', response_model=list[ReportListItemOut])
def list_reports_endpoint(
    page: Optional[str] = None,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> list[ReportListItemOut]:
    return list_open_reports(session, parse_page(page), caller_role=user.role)


@router.get('/{report_id}', response_model=ReportDetailOut)
def fetch_report_endpoint(
    report_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> ReportDetailOut:
    return fetch_report(session, report_id, caller_role=user.role)


@router.post('/{report_id}/resolve', status_code=status.HTTP_200_OK, response_class=Response)
def resolve_report_endpoint(
    report_id: str,
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
) -> Response:
    resolve_report(session, report_id, caller_role=user.role)
    return Response(status_code=status.HTTP_200_OK)
