from dataclasses import asdict, fields
from typing import Optional

from loguru import logger
from sqlmodel import Session

from app.models.enums import UserRole
from app.schemas.stats import UNKNOWN, StatsSnapshotOut
from app.services.authz import requires_role
from app.services.count_oracle import LocalCounts, count_all
from app.services.tracker_client import ScrapeError, TrackerScrapeClient, TrackerStats

SCRAPE_FIELDS = tuple(field.name for field in fields(TrackerStats))


def scrape_tracker(tracker: TrackerScrapeClient) -> Optional[TrackerStats]:
    """Best-effort tracker scrape; ``None`` when the tracker is down or unparsable."""
    try:
        stats = tracker.fetch_stats()
    except ScrapeError as exc:
        logger.warning('tracker.scrape_failed', url=tracker.stats_url, error=str(exc))
        return None
    if stats.leechers < 0:
        logger.warning('tracker.negative_leechers', peers=stats.peers, seeds=stats.seeds)
    return stats


def build_snapshot(counts: LocalCounts, tracker_stats: Optional[TrackerStats]) -> StatsSnapshotOut:
    if tracker_stats is None:
        scraped = dict.fromkeys(SCRAPE_FIELDS, UNKNOWN)
    else:
        scraped = asdict(tracker_stats)
    return StatsSnapshotOut(**asdict(counts), **scraped)


@requires_role(UserRole.ADMIN, action='view tracker stats')
def compute_stats(session: Session, tracker: TrackerScrapeClient) -> StatsSnapshotOut:
    counts = count_all(session)
    tracker_stats = scrape_tracker(tracker)
    return build_snapshot(counts, tracker_stats)
