# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from quoteplan.errors import SegmentSourceError
from quoteplan.model.segment import ScheduledTaskSegment
from quoteplan.service.ingest import convert_segment_records


class SegmentRepository:
    """
    Read-only source of scheduled segments backed by a YAML or JSON document.

    The document is either a list of segment records or a mapping with a
    ``segments`` list. Records are converted once, on first access.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._segments: Optional[list[ScheduledTaskSegment]] = None

    @property
    def segments(self) -> list[ScheduledTaskSegment]:
        if self._segments is None:
            self.__load_data()
        if self._segments is None:
            raise SegmentSourceError(f"No segments loaded from {self.path}")
        return self._segments

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise SegmentSourceError(f"Segment file not found: {self.path}")

        try:
            document: Any = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise SegmentSourceError(f"Could not read {self.path}: {e}") from e

        if document is None:
            records: list[Any] = []
        elif isinstance(document, list):
            records = document
        elif isinstance(document, dict) and isinstance(
            document.get("segments", []), list
        ):
            records = document.get("segments") or []
        else:
            raise SegmentSourceError(
                f"{self.path} must contain a list of segments or a 'segments' list"
            )

        self._segments = convert_segment_records(records)

    def get_all_segments(self) -> list[ScheduledTaskSegment]:
        return list(self.segments)
