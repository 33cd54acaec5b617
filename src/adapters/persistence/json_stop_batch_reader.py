from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from src.adapters.settings import StopsDataConfig
from src.app.ports.output import IStopBatchReader


@dataclass(slots=True)
class JsonStopBatchReader(IStopBatchReader):
    """Reads stop batches from JSON files in a directory.

    Falls back to STOPS_DATA_PATH (default data/stops) when no path is given.
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        if self.base_path is not None:
            return Path(self.base_path)
        return StopsDataConfig.from_env().base_path

    def read_batch(self, name: str) -> Mapping[str, Any]:
        # FileNotFoundError / json.JSONDecodeError surface as OSError / ValueError.
        with (self._base() / name).open("r", encoding="utf-8") as fp:
            return json.load(fp)
