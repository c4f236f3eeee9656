from typing import Optional
from sqlmodel import Session, select
from app.models.torrent import Torrent


def get_torrent_by_info_hash(session: Session, info_hash: str) -> Optional[Torrent]:
    return session.exec(select(Torrent).where(Torrent.info_hash == info_hash)).first()
