"""Search trace sinks: an in-memory list or a rotated JSONL file."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Union
import gzip
import json
import logging
import shutil

logger = logging.getLogger(__name__)

# Event types emitted by the Dijkstra engine
DEQUEUE = "DEQUEUE"
SKIP = "SKIP"
VISIT = "VISIT"
CHECK = "CHECK"
UPDATE = "UPDATE"
FOUND = "FOUND"

DEFAULT_RETENTION_MB = 50

Writer = Callable[[int, str, Any], None]


def _event(step: int, event_type: str, data: Any) -> Dict[str, Any]:
    return {"step": step, "event_type": event_type, "data": data}


class TraceLog:
    """JSONL trace file compressed aside once it reaches ``retention_mb``.

    The size check happens when a run starts, so one search is never split
    across two files. A retention of ``0`` rotates before every run.
    """

    def __init__(self, path: str | Path, retention_mb: int = DEFAULT_RETENTION_MB) -> None:
        if retention_mb < 0:
            raise ValueError(f"retention_mb must not be negative, got {retention_mb}")
        self.path = Path(path)
        self.retention_bytes = retention_mb * 1024 * 1024

    def needs_rotation(self) -> bool:
        return self.path.exists() and self.path.stat().st_size >= self.retention_bytes

    def rotate(self) -> Path:
        """Move the current file to a timestamped ``.gz`` and return its path."""

        ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
        gz_path = self.path.with_name(f"{self.path.stem}_{ts}{self.path.suffix}.gz")
        with open(self.path, "rb") as src, gzip.open(gz_path, "wb") as dst:
            shutil.copyfileobj(src, dst)
        self.path.unlink()
        logger.info("Rotated search trace to %s", gz_path)
        return gz_path

    @contextmanager
    def run(self) -> Iterator[Writer]:
        """Open the file for one search and yield a ``write(step, type, data)``."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.needs_rotation():
            self.rotate()
        with self.path.open("a", encoding="utf-8") as fh:

            def write(step: int, event_type: str, data: Any) -> None:
                fh.write(json.dumps(_event(step, event_type, data), ensure_ascii=False) + "\n")

            yield write

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        yield from iter_events(self.path)


TraceSink = Union[TraceLog, List[Dict[str, Any]]]


@contextmanager
def open_trace(sink: TraceSink | None) -> Iterator[Writer | None]:
    """Yield a writer for ``sink``, or ``None`` when tracing is off."""

    if sink is None:
        yield None
    elif isinstance(sink, list):
        yield lambda step, event_type, data: sink.append(_event(step, event_type, data))
    else:
        with sink.run() as write:
            yield write


def iter_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    """Yield events from ``path`` in the order they were logged."""

    p = Path(path)
    if not p.exists():
        return

    with p.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                logger.warning("Skipping malformed trace line in %s", p)


__all__ = [
    "TraceLog",
    "TraceSink",
    "open_trace",
    "iter_events",
    "DEQUEUE",
    "SKIP",
    "VISIT",
    "CHECK",
    "UPDATE",
    "FOUND",
]
