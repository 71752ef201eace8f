"""CSV network repository adapter.

Loads a NetworkSnapshot from three CSV files:

- stations.csv: ``station_id,station_name``
- lines.csv: ``line_id,line_name,extra_fare``
- sections.csv: ``line_id,up_station_id,down_station_id,distance,duration``

The snapshot is loaded once per repository and cached.
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ...config import DataConfig, get_config
from ...domain.errors import InvalidTopologyError, NetworkDataError
from ...domain.models import Line, NetworkSnapshot, Section, Station


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort. Referential checks
    between sections and stations are left to ``build_graph``; only a
    section naming an unknown line is rejected here, since it cannot be
    turned into a Section at all.

    Attributes:
        config: Data configuration (directory, file names)
    """

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    # Cached data
    _snapshot: Optional[NetworkSnapshot] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> NetworkSnapshot:
        """Load the network snapshot from CSV files.

        Raises:
            NetworkDataError: If a file is missing or a row is malformed.
        """
        with self._lock:
            if self._snapshot is not None:
                return self._snapshot

            self._logger.debug(
                "Loading network",
                extra={"data_dir": str(self.config.data_dir)},
            )

            stations = self._load_stations(self.config.stations_path)
            lines = self._load_lines(self.config.lines_path)
            sections = self._load_sections(self.config.sections_path, lines)

            self._snapshot = NetworkSnapshot(
                stations=tuple(stations),
                lines=tuple(lines.values()),
                sections=tuple(sections),
            )
            self._logger.info(
                "Network loaded",
                extra={
                    "stations": len(stations),
                    "lines": len(lines),
                    "sections": len(sections),
                },
            )
            return self._snapshot

    def _read_rows(self, path: Path) -> List[Dict[str, str]]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                return list(csv.DictReader(f))
        except OSError as e:
            raise NetworkDataError(
                f"Failed to read {path.name}", file_path=str(path), cause=e
            )

    def _load_stations(self, path: Path) -> List[Station]:
        stations: List[Station] = []
        for line_no, row in enumerate(self._read_rows(path), start=2):
            try:
                stations.append(
                    Station(
                        id=int(row["station_id"]),
                        name=(row.get("station_name") or "").strip(),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                raise NetworkDataError(
                    f"Malformed station row {line_no}",
                    file_path=str(path),
                    cause=e,
                )
        return stations

    def _load_lines(self, path: Path) -> Dict[int, Line]:
        lines: Dict[int, Line] = {}
        for line_no, row in enumerate(self._read_rows(path), start=2):
            try:
                extra_fare = (row.get("extra_fare") or "").strip()
                line = Line(
                    id=int(row["line_id"]),
                    name=(row.get("line_name") or "").strip(),
                    extra_fare=int(extra_fare) if extra_fare else 0,
                )
            except (KeyError, TypeError, ValueError, InvalidTopologyError) as e:
                raise NetworkDataError(
                    f"Malformed line row {line_no}",
                    file_path=str(path),
                    cause=e,
                )
            lines[line.id] = line
        return lines

    def _load_sections(self, path: Path, lines: Dict[int, Line]) -> List[Section]:
        sections: List[Section] = []
        for line_no, row in enumerate(self._read_rows(path), start=2):
            try:
                line_id = int(row["line_id"])
                up_id = int(row["up_station_id"])
                down_id = int(row["down_station_id"])
                distance = int(row["distance"])
                duration = int(row["duration"])
            except (KeyError, TypeError, ValueError) as e:
                raise NetworkDataError(
                    f"Malformed section row {line_no}",
                    file_path=str(path),
                    cause=e,
                )
            if line_id not in lines:
                raise NetworkDataError(
                    f"Section row {line_no} references unknown line {line_id}",
                    file_path=str(path),
                )
            sections.append(
                Section(
                    up_station_id=up_id,
                    down_station_id=down_id,
                    distance=distance,
                    duration=duration,
                    line=lines[line_id],
                )
            )
        return sections

    def clear_cache(self) -> None:
        """Clear the cached snapshot."""
        with self._lock:
            self._snapshot = None
        self._logger.debug("Network cache cleared")
