"""
Session history store.

Accepts completed-session records and returns them newest first. The
drill core only writes here; statistics read it back.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import sessionmaker

from core.schemas import SessionRecord, SessionSummary
from core.store.models import GameHistoryRow

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # sqlite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class HistoryStore:
    """Append and list completed sessions."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def save(self, owner_id: str, record: SessionRecord) -> None:
        session = self._session_factory()
        try:
            session.add(GameHistoryRow(
                owner_id=owner_id,
                total_words=record.summary.total_words,
                words_used=record.summary.used_count,
                words_discarded=record.summary.discarded_count,
                total_actions=record.summary.total_actions,
                duration=record.duration_seconds,
                created_at=_as_utc(record.created_at),
            ))
            session.commit()
            logger.info(
                "Saved session history for %s: %d words used in %ds",
                owner_id, record.summary.used_count, record.duration_seconds,
            )
        finally:
            session.close()

    def list(self, owner_id: str) -> list[SessionRecord]:
        session = self._session_factory()
        try:
            rows = session.query(GameHistoryRow).filter(
                GameHistoryRow.owner_id == owner_id
            ).order_by(GameHistoryRow.created_at.desc(), GameHistoryRow.id.desc()).all()

            return [
                SessionRecord(
                    summary=SessionSummary(
                        total_words=row.total_words,
                        used_count=row.words_used,
                        discarded_count=row.words_discarded,
                        total_actions=row.total_actions,
                    ),
                    duration_seconds=row.duration,
                    created_at=_as_utc(row.created_at),
                )
                for row in rows
            ]
        finally:
            session.close()
