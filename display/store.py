"""Triangle store: the last submitted triangle and a short history.

History is most-recent-first, capped at HISTORY_LIMIT, and holds no two equal
triangles.
"""
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from trigeom.types import Triangle
from trigeom.geometry import GeometryError, is_finite_point

log = logging.getLogger(__name__)

HISTORY_LIMIT = 5
STORE_ENV_VAR = "TRIGEOM_STORE"


def default_store_path() -> Path:
    """Store file from $TRIGEOM_STORE, else ~/.trigeom/store.json."""
    env = os.environ.get(STORE_ENV_VAR)
    return Path(env) if env else Path.home() / ".trigeom" / "store.json"


def push_history(history: list[Triangle], tri: Triangle, limit: int = HISTORY_LIMIT) -> list[Triangle]:
    """New history with tri first, earlier copies of it removed, truncated to limit."""
    return [tri] + [t for t in history if t != tri][:limit - 1]


# ============================================================
# JSON conversion
# ============================================================
def triangle_to_json(tri: Triangle) -> dict:
    return {k: {"x": p[0], "y": p[1]} for k, p in zip("abc", tri)}


def triangle_from_json(data) -> Triangle:
    """Triangle from {'a': {'x':..,'y':..}, ...}. Raises GeometryError on bad records."""
    try:
        pts = [(float(data[k]["x"]), float(data[k]["y"])) for k in "abc"]
    except (KeyError, TypeError, ValueError) as e:
        raise GeometryError(f"Malformed triangle record: {data!r}") from e
    if not all(is_finite_point(p) for p in pts):
        raise GeometryError(f"Non-finite triangle record: {data!r}")
    return Triangle(*pts)


# ============================================================
# Stores
# ============================================================
class TriangleStore(ABC):
    """Persistence for the last triangle and the recent-triangles history."""

    @abstractmethod
    def load(self) -> Triangle | None:
        """Last saved triangle, or None."""

    @abstractmethod
    def save(self, tri: Triangle) -> None:
        """Record tri as the last triangle and push it onto the history."""

    @abstractmethod
    def history(self) -> list[Triangle]:
        """Recent triangles, most recent first."""


class MemoryStore(TriangleStore):
    def __init__(self):
        self._last: Triangle | None = None
        self._history: list[Triangle] = []

    def load(self) -> Triangle | None:
        return self._last

    def save(self, tri: Triangle) -> None:
        self._last = tri
        self._history = push_history(self._history, tri)

    def history(self) -> list[Triangle]:
        return list(self._history)


class JsonFileStore(TriangleStore):
    """Store backed by a JSON document {"last": {...}, "history": [...]}.

    A missing or unreadable file reads as an empty store; write errors propagate.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning("Could not read store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring store %s: top level is not an object", self.path)
            return {}
        return data

    def _write(self, last: Triangle, history: list[Triangle]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        doc = {"last": triangle_to_json(last), "history": [triangle_to_json(t) for t in history]}
        self.path.write_text(json.dumps(doc, indent=2) + "\n", encoding="utf-8")
        log.debug("Saved store %s (%d history entries)", self.path, len(history))

    def load(self) -> Triangle | None:
        raw = self._read().get("last")
        if raw is None:
            return None
        try:
            return triangle_from_json(raw)
        except GeometryError as e:
            log.warning("Ignoring last triangle in %s: %s", self.path, e)
            return None

    def history(self) -> list[Triangle]:
        raw = self._read().get("history", [])
        if not isinstance(raw, list):
            log.warning("Ignoring history in %s: not a list", self.path)
            return []
        out = []
        for item in raw:
            try:
                out.append(triangle_from_json(item))
            except GeometryError as e:
                log.warning("Skipping history entry in %s: %s", self.path, e)
        return out

    def save(self, tri: Triangle) -> None:
        self._write(tri, push_history(self.history(), tri))
