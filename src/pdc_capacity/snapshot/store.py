"""
Session-scoped snapshot holder.

The store owns exactly one Snapshot. Every change, whether an import or an
editor action, replaces it whole. Imports are validated completely before
the swap, so a failed import leaves the previous configuration in place.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import ValidationError

from pdc_capacity.domain.defaults import default_snapshot
from pdc_capacity.domain.models import Snapshot
from pdc_capacity.snapshot.schema import SnapshotModel, snapshot_to_dict
from pdc_capacity.utils.logger import get_logger

log = get_logger(__name__)


class SnapshotError(ValueError):
    """A snapshot could not be parsed; nothing was applied."""


def parse_snapshot(data: Any) -> Snapshot:
    if not isinstance(data, dict):
        raise SnapshotError(
            f"Snapshot must be a JSON object, got {type(data).__name__}"
        )
    try:
        return SnapshotModel.model_validate(data).to_domain()
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc.error_count()} error(s)\n{exc}") from exc


class SnapshotStore:

    def __init__(self, snapshot: Optional[Snapshot] = None):
        self._snapshot = snapshot if snapshot is not None else default_snapshot()

    @property
    def current(self) -> Snapshot:
        return self._snapshot

    def replace(self, snapshot: Snapshot) -> Snapshot:
        self._snapshot = snapshot
        return snapshot

    def apply(self, edit: Callable[[Snapshot], Snapshot]) -> Snapshot:
        """Run a pure edit against the current snapshot and keep the result."""
        return self.replace(edit(self._snapshot))

    def reset(self) -> Snapshot:
        return self.replace(default_snapshot())

    # ----------------------------
    # Import
    # ----------------------------

    def load_dict(self, data: Any) -> Snapshot:
        try:
            snapshot = parse_snapshot(data)
        except SnapshotError:
            log.error("Snapshot import rejected; keeping current configuration", exc_info=True)
            raise
        log.info(
            "Snapshot imported | station_types=%d shifts=%d",
            len(snapshot.station_types),
            len(snapshot.shifts),
        )
        return self.replace(snapshot)

    def load_json(self, text: str) -> Snapshot:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            log.error("Snapshot import rejected: not valid JSON (%s)", exc)
            raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
        return self.load_dict(data)

    def load_file(self, path: Path | str) -> Snapshot:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            log.error("Snapshot file unreadable: %s", path)
            raise SnapshotError(f"Cannot read snapshot file {path}: {exc}") from exc
        return self.load_json(text)

    # ----------------------------
    # Export
    # ----------------------------

    def export_dict(self) -> dict:
        return snapshot_to_dict(self._snapshot)

    def export_json(self) -> str:
        return json.dumps(self.export_dict(), indent=2)

    def save_file(self, path: Path | str) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export_json(), encoding="utf-8")
        log.info("Snapshot exported: %s", path)
        return path
