"""Save and load the whole application state as one JSON document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..errors import JointyError
from ..state import StudioState
from .adapter import from_snapshot, to_snapshot
from .schemas import StudioSnapshot

logger = logging.getLogger(__name__)


class StateError(Exception):
    """Raised when saved state cannot be read, parsed or validated.

    Attributes:
        message: The primary error message
        error_type: "file_not_found", "file_read_error", "json_parse",
            "validation" or "domain"
        path: Path of the state file, when loading from disk
        details: Per-field details (JSON path, message, offending value)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as ``library.bolts[0].thread.pitch``."""
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def dumps(state: StudioState, *, indent: int | None = 2) -> str:
    """Serialize `state` to a JSON string."""
    return to_snapshot(state).model_dump_json(indent=indent)


def loads(text: str, *, path: Path | None = None) -> StudioState:
    """Parse a JSON snapshot back into a `StudioState`.

    Raises:
        StateError: on invalid JSON ("json_parse"), schema mismatch
            ("validation") or data violating a domain invariant ("domain").
    """
    where = f" in {path}" if path is not None else ""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateError(
            message=f"Invalid JSON{where} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    try:
        snapshot = StudioSnapshot.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        lines = [f"Saved state validation failed{where}:"]
        lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
        raise StateError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        ) from e

    try:
        return from_snapshot(snapshot)
    except JointyError as e:
        raise StateError(
            message=f"Saved state is inconsistent{where}: {e}",
            error_type="domain",
            path=path,
        ) from e


def save_state(state: StudioState, path: str | Path) -> Path:
    """Write `state` to `path` (parent directories are created)."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dumps(state), encoding="utf-8")
    logger.debug("Saved state to %s (%s)", out, state.library.counts())
    return out


def load_state(path: str | Path, *, missing_ok: bool = True) -> StudioState:
    """Read state from `path`.

    A missing file gives a fresh default state when `missing_ok` is true and
    raises `StateError` ("file_not_found") otherwise.
    """
    src = Path(path)
    if not src.exists():
        if missing_ok:
            logger.warning("No saved state at %s, starting with defaults", src)
            return StudioState()
        raise StateError(
            message=f"State file not found: {src}",
            error_type="file_not_found",
            path=src,
        )

    try:
        content = src.read_text(encoding="utf-8")
    except OSError as e:
        raise StateError(
            message=f"Error reading state file: {src}: {e}",
            error_type="file_read_error",
            path=src,
        ) from e

    state = loads(content, path=src)
    logger.debug("Loaded state from %s (%s)", src, state.library.counts())
    return state


__all__ = ["StateError", "dumps", "loads", "save_state", "load_state"]
