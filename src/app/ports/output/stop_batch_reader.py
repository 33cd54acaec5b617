from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class IStopBatchReader(ABC):
    """Port for reading a named stop batch.

    A batch is shaped as {"fields": [{"id": ...}, ...], "records": [[...], ...]}.
    Implementations raise OSError or ValueError when the batch cannot be read.
    """

    @abstractmethod
    def read_batch(self, name: str) -> Mapping[str, Any]:
        raise NotImplementedError
