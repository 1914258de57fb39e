from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd


def write_records_to_csv(path: Path, rows: Iterable[dict]) -> Path:
    df = pd.DataFrame(rows)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path


def read_session_rows(path: Path) -> list[dict]:
    """Load exported session rows, turning empty cells into ``None``."""

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    records = df.to_dict(orient="records")
    return [{key: (value if value != "" else None) for key, value in row.items()} for row in records]
