"""
Preset store.

Named setup configurations per owner. Configs are stored as their
camelCase mapping so older clients' ``timer`` key keeps loading.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import sessionmaker

from core.errors import InvalidPreset
from core.presets import preset_from_mapping, preset_to_mapping
from core.schemas import PresetConfig
from core.store.models import PresetRow

logger = logging.getLogger(__name__)


class PresetStore:
    """Save and list named presets."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def save(self, owner_id: str, name: str, config: PresetConfig) -> None:
        name = (name or "").strip()
        if not name:
            raise InvalidPreset("Please enter a preset name")

        session = self._session_factory()
        try:
            session.add(PresetRow(
                owner_id=owner_id,
                name=name,
                config=preset_to_mapping(config),
                created_at=datetime.now(timezone.utc),
            ))
            session.commit()
            logger.info("Saved preset %r for %s", name, owner_id)
        finally:
            session.close()

    def list(self, owner_id: str) -> list[tuple[str, PresetConfig]]:
        """
        Presets in save order. Rows that no longer parse are skipped.
        """
        session = self._session_factory()
        try:
            rows = session.query(PresetRow).filter(
                PresetRow.owner_id == owner_id
            ).order_by(PresetRow.id).all()

            presets: list[tuple[str, PresetConfig]] = []
            for row in rows:
                try:
                    presets.append((row.name, preset_from_mapping(row.config)))
                except InvalidPreset:
                    logger.warning("Skipping unreadable preset %s (%r)", row.id, row.name)
            return presets
        finally:
            session.close()
