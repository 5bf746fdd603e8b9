"""
Global click counter backed by a JSON file.
Falls back to memory-only storage when the file cannot be written or read
(read-only deployments); the switch is permanent for the store's lifetime.
"""
import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict

logger = logging.getLogger(__name__)

MAX_INCREMENT = 100


class InvalidIncrement(ValueError):
    """Increment is not an integer in [0, MAX_INCREMENT]."""


def parse_increment(amount: Any) -> int:
    """Integer in [0, MAX_INCREMENT]; integral floats such as 5.0 are accepted."""
    # bool is an int subclass but not a valid count
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    if isinstance(amount, bool) or not isinstance(amount, int) or not 0 <= amount <= MAX_INCREMENT:
        raise InvalidIncrement(f"Invalid increment value: {amount!r}")
    return amount


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _initial() -> Dict[str, Any]:
    return {"total": 0, "lastUpdated": _now()}


class ClickStore:
    def __init__(self, filepath: str = os.path.join("data", "clicks.json")):
        self.filepath = filepath
        self.use_memory_store = False
        self._memory: Dict[str, Any] = _initial()
        self._lock = threading.Lock()

    def _ensure_data_dir(self) -> None:
        directory = os.path.dirname(self.filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def _switch_to_memory(self, reason: str, exc: Exception) -> None:
        logger.warning("Click store %s: %s (%s); using memory-only storage", reason, self.filepath, exc)
        self.use_memory_store = True

    def _read(self) -> Dict[str, Any]:
        if self.use_memory_store:
            return dict(self._memory)

        if not os.path.exists(self.filepath):
            data = _initial()
            try:
                self._ensure_data_dir()
                with open(self.filepath, "w") as f:
                    json.dump(data, f, indent=2)
            except OSError as exc:
                self._switch_to_memory("cannot create", exc)
            self._memory = data
            return dict(data)

        try:
            with open(self.filepath, "r") as f:
                data = json.load(f)
            data = {"total": int(data["total"]), "lastUpdated": str(data.get("lastUpdated", _now()))}
        except (OSError, ValueError, KeyError, TypeError) as exc:
            self._switch_to_memory("cannot read", exc)
            return dict(self._memory)
        self._memory = data
        return dict(data)

    def _write(self, data: Dict[str, Any]) -> None:
        self._memory = dict(data)
        if self.use_memory_store:
            return
        try:
            self._ensure_data_dir()
            with open(self.filepath, "w") as f:
                json.dump(data, f, indent=2)
        except OSError as exc:
            self._switch_to_memory("cannot write", exc)

    def read(self) -> Dict[str, Any]:
        with self._lock:
            return self._read()

    def increment(self, amount: Any = 1) -> Dict[str, Any]:
        amount = parse_increment(amount)
        with self._lock:
            current = self._read()
            data = {"total": current["total"] + amount, "lastUpdated": _now()}
            self._write(data)
        return data

    def reset(self) -> Dict[str, Any]:
        with self._lock:
            data = {"total": 0, "lastUpdated": _now()}
            self._write(data)
        logger.info("Click counter reset")
        return data
