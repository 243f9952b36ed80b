"""In-memory branch repository, optionally seeded from a JSON export."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from kebabish_geo.application.ports.branch_repo import BranchRepository
from kebabish_geo.domain.entities.branch import Branch
from kebabish_geo.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


# ─── Mappers ─────────────────────────────────────────────────────────


def _branch_from_record(record: dict) -> Branch:
    """Map a ``branches`` row export (camelCase, decimal-as-string coords) to a Branch."""
    location = None
    lat = record.get("latitude")
    lon = record.get("longitude")
    if lat not in (None, "") and lon not in (None, ""):
        location = GeoPoint(latitude=float(lat), longitude=float(lon))
    return Branch(
        id=str(record["id"]),
        name=record["name"],
        city=record["city"],
        address=record.get("address"),
        location=location,
        is_active=record.get("isActive", record.get("is_active", True)),
    )


def load_branches(path: Path) -> list[Branch]:
    """Read branches from a JSON array file.

    Raises:
        ValueError: if the file is not a JSON array of branch records.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Branches file {path} must contain a JSON array")
    return [_branch_from_record(r) for r in data]


# ─── Repository ──────────────────────────────────────────────────────


class InMemoryBranchRepository(BranchRepository):
    def __init__(self, branches: list[Branch] | None = None):
        self._branches: dict[str, Branch] = {b.id: b for b in branches or []}

    @classmethod
    def from_file(cls, path: str | Path) -> InMemoryBranchRepository:
        """Seed from ``path``; a missing file yields an empty repository."""
        path = Path(path)
        if not path.exists():
            logger.warning("Branches file not found: %s — starting with no branches", path)
            return cls()
        branches = load_branches(path)
        logger.info("Loaded %d branches from %s", len(branches), path)
        return cls(branches)

    async def get_by_id(self, branch_id: str) -> Branch | None:
        return self._branches.get(branch_id)

    async def get_all(self) -> list[Branch]:
        return list(self._branches.values())

    async def get_active(self) -> list[Branch]:
        return [b for b in self._branches.values() if b.is_active]
