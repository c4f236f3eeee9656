from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User
from app.schemas.stats import StatsSnapshotOut
from app.services.auth_service import get_current_user
from app.services.stats_service import compute_stats
from app.services.tracker_client import TrackerScrapeClient, get_tracker_client

router = APIRouter(prefix='/admin', tags=['admin'])


@router.get('/stats', response_model=StatsSnapshotOut)
def stats_endpoint(
    session: Session = Depends(get_session),
    user: User = Depends(get_current_user),
    tracker: TrackerScrapeClient = Depends(get_tracker_client),
) -> StatsSnapshotOut:
    return compute_stats(session, tracker, caller_role=user.role)
