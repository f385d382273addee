"""
Trace file reader.

Storage format: JSONL (newline-delimited JSON), one TraceStep per line.
Blank lines are skipped.
"""

import json
from typing import Iterator, List

from pydantic import ValidationError

from ..core.errors import TraceError
from .models import TraceStep


def _parse(raw: str, where: str) -> TraceStep:
    try:
        return TraceStep.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise TraceError(f"{where}: invalid JSON: {e.msg}") from e
    except ValidationError as e:
        raise TraceError(f"{where}: invalid trace step: {e.errors()[0]['msg']}") from e


def iter_trace(path: str) -> Iterator[TraceStep]:
    """
    Stream steps from a JSONL trace.

    Raises:
        FileNotFoundError: If path does not exist
        TraceError: If a line is not a valid step (message names the line)
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            yield _parse(line, f"{path}:{lineno}")


def load_trace(path: str) -> List[TraceStep]:
    return list(iter_trace(path))


def load_state(path: str) -> TraceStep:
    """Read a single JSON document holding one step."""
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    if not raw.strip():
        raise TraceError(f"{path}: empty state file")
    return _parse(raw, path)
