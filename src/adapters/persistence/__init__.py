from .json_stop_batch_reader import JsonStopBatchReader

__all__ = [
    "JsonStopBatchReader",
]
