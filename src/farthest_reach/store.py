"""JSON result store.

Search results are written once per run and never updated in place:
  - results/latest.json: the most recent run
  - results/history/<timestamp>.json: every run, for later comparison
  - derived/: rendered outputs (HTML site), always recomputed

Every JSON file is wrapped in a metadata envelope recording where the data
came from and when it was written. Nothing in the store feeds back into a
search; each search starts from scratch.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class DataStore:
    """Reads and writes enveloped JSON files under one base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.results = base_dir / "results"
        self.history = self.results / "history"
        self.derived = base_dir / "derived"

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(self, path: Path, data: Any, source: str, **params: Any) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``results/latest.json``).
            data: Payload to store under the ``data`` key.
            source: Oracle that produced the data (e.g. ``"google"``).
            **params: Extra metadata fields (request parameters, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "written_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def write_text(self, path: Path, text: str) -> Path:
        """Write a rendered text file (no envelope)."""
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_text(text, encoding="utf-8")
        return full

    def history_paths(self) -> list[Path]:
        """All archived runs, oldest first."""
        if not self.history.exists():
            return []
        return sorted(self.history.glob("*.json"))

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
