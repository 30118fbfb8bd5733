"""JSON snapshot persistence.

A snapshot file is a JSON object holding named entries, much like a browser
key-value store: ``carom_tournament`` for a full tournament and
``carom_tournament_matches`` for the bare match list of the simple league.
Every save rewrites the whole file through a temporary file and an atomic
rename; a load returns exactly what was saved or None.
"""

# Carom Tournament
# Copyright (C) 2025  Carom Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Union

from caromtournament.constants import (
    DATA_DIR_ENV_VAR,
    DEFAULT_SAVE_FILE,
    MATCHES_SNAPSHOT_KEY,
    TOURNAMENT_SNAPSHOT_KEY,
)
from caromtournament.exceptions import FileLoadException, FileSaveException
from caromtournament.models import Match, Tournament
from caromtournament.type_hints import SnapshotDict
from caromtournament.utils import setup_logger

logger = setup_logger(__name__)


def default_data_dir() -> Path:
    """Directory holding snapshots: $CAROM_TOURNAMENT_HOME or ~/.caromtournament."""
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".caromtournament"


def default_snapshot_path() -> Path:
    return default_data_dir() / DEFAULT_SAVE_FILE


class SnapshotStore:
    """Load and save tournament snapshots in a single JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else default_snapshot_path()

    # ========== Tournament ==========

    def save_tournament(self, tournament: Tournament) -> None:
        """Persist ``tournament``, replacing any earlier snapshot."""
        self._write_key(TOURNAMENT_SNAPSHOT_KEY, tournament.to_dict())
        logger.info("Tournament %s saved to %s", tournament.name, self.path)

    def load_tournament(self) -> Optional[Tournament]:
        """Return the saved tournament, or None if nothing was saved.

        Raises:
            FileLoadException: If the file is unreadable or the snapshot is corrupt
        """
        data = self._read_key(TOURNAMENT_SNAPSHOT_KEY)
        if data is None:
            return None
        try:
            tournament = Tournament.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise FileLoadException(f"Corrupt tournament snapshot in {self.path}: {e}") from e
        logger.info("Loaded tournament %s from %s", tournament.name, self.path)
        return tournament

    # ========== Bare match list (simple league) ==========

    def save_matches(self, matches: List[Match]) -> None:
        self._write_key(MATCHES_SNAPSHOT_KEY, [m.to_dict() for m in matches])
        logger.info("Saved %d matches to %s", len(matches), self.path)

    def load_matches(self) -> Optional[List[Match]]:
        """Return the saved match list, or None if nothing was saved.

        Raises:
            FileLoadException: If the file is unreadable or the snapshot is corrupt
        """
        data = self._read_key(MATCHES_SNAPSHOT_KEY)
        if data is None:
            return None
        try:
            return [Match.from_dict(m) for m in data]
        except (KeyError, TypeError, ValueError) as e:
            raise FileLoadException(f"Corrupt match snapshot in {self.path}: {e}") from e

    def clear(self) -> None:
        """Delete the snapshot file."""
        if self.path.exists():
            self.path.unlink()
            logger.info("Removed snapshot %s", self.path)

    # ========== File access ==========

    def _read_document(self) -> SnapshotDict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not read snapshot {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise FileLoadException(f"Snapshot {self.path} is not a JSON object")
        return document

    def _read_key(self, key: str) -> Optional[Any]:
        return self._read_document().get(key)

    def _write_key(self, key: str, value: Any) -> None:
        try:
            document = self._read_document()
        except FileLoadException:
            logger.warning("Overwriting unreadable snapshot %s", self.path)
            document = {}
        document[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.path.name, suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=4, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            raise FileSaveException(f"Could not save snapshot {self.path}: {e}") from e
