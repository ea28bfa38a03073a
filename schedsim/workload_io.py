from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List

from .errors import InvalidInputError
from .models import Process
from .process_table import coerce_process

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise InvalidInputError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.info(f"Loaded {len(processes)} processes from {path}")
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"Malformed JSON workload {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"Workload {path} is not UTF-8 text: {exc}") from exc

    if not isinstance(raw, list):
        raise InvalidInputError("JSON workload must be a list of process objects")

    return [coerce_process(entry, position) for position, entry in enumerate(raw)]


def _load_csv(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8", newline="") as f:
        try:
            rows = list(csv.DictReader(f))
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"Workload {path} is not UTF-8 text: {exc}") from exc
        except csv.Error as exc:
            raise InvalidInputError(f"Malformed CSV workload {path}: {exc}") from exc

    return [coerce_process(row, position) for position, row in enumerate(rows)]
