"""
Durable key-value storage for editor state.

Each slot is one JSON file in the storage directory. ``PersistentValue``
reads a slot through to a pydantic type and writes every change back.
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generic, Iterator, Optional, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

logger = structlog.get_logger()

RESUME_SLOT = "resumeData"
FEEDBACK_SLOT = "aiFeedback"
PENDING_AI_SLOT = "aiPending"

T = TypeVar("T")


@contextmanager
def atomic_path(target: Path) -> Iterator[Path]:
    """
    Yield a temporary path beside ``target`` and move it onto ``target`` on success.

    If the block raises, only the temporary file is removed; an existing
    ``target`` is left untouched.
    """
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.stem}.", suffix=f"{target.suffix}.tmp"
    )
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        yield tmp
        tmp.replace(target)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


class SlotStore:
    """Manages named storage slots as JSON files."""

    def __init__(self, storage_dir: Path):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, slot: str) -> Path:
        return self.storage_dir / f"{slot}.json"

    def read(self, slot: str) -> Optional[bytes]:
        """Return the raw slot bytes, or None if the slot was never written."""
        path = self._path(slot)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, slot: str, text: str):
        """Replace the slot contents atomically."""
        with atomic_path(self._path(slot)) as tmp:
            tmp.write_text(text, encoding="utf-8")

    def delete(self, slot: str):
        """Remove a slot if present."""
        self._path(slot).unlink(missing_ok=True)


class PersistentValue(Generic[T]):
    """Read-through/write-through bridge between a slot and a typed value."""

    def __init__(self, store: SlotStore, slot: str, value_type: Any, default: T):
        """
        Args:
            store: Slot store holding the durable copy
            slot: Slot name (e.g. "resumeData")
            value_type: Type the slot JSON is validated against
            default: Value used when the slot is missing or unreadable
        """
        self.store = store
        self.slot = slot
        self.default = default
        self._adapter = TypeAdapter(value_type)

    def load(self) -> T:
        """Load the slot value, falling back to a copy of the default."""
        raw = self.store.read(self.slot)
        if not raw:
            return self._default_copy()
        try:
            value = self._adapter.validate_json(raw)
            logger.debug("Loaded storage slot", slot=self.slot)
            return value
        except (ValidationError, ValueError) as e:
            logger.warning(
                "Failed to parse storage slot, using default",
                slot=self.slot,
                error=str(e),
            )
            return self._default_copy()

    def save(self, value: T):
        """Serialize the value with camelCase keys and write the slot."""
        self.store.write(
            self.slot, self._adapter.dump_json(value, by_alias=True).decode("utf-8")
        )

    def _default_copy(self) -> T:
        return self._adapter.validate_python(
            self._adapter.dump_python(self.default, by_alias=True)
        )
