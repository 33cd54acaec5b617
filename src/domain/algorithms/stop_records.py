from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from src.domain.exceptions import RecordFieldMissing
from src.domain.models import GeoPoint, Stop

logger = logging.getLogger(__name__)

CODE_FIELD = "id_amat"
LINES_FIELD = "linee"
LON_FIELD = "LONG_X_4326"
LAT_FIELD = "LAT_Y_4326"
# Metro stops carry "nome", surface stops "ubicazione".
DESCRIPTION_FIELDS = ("nome", "ubicazione")
UNKNOWN_DESCRIPTION = "Unknown"


@dataclass(frozen=True, slots=True)
class StopColumns:
    """Positional indexes of the stop fields, resolved once per batch.

    A required index is None when the batch does not declare that field; every
    record of such a batch then fails with RecordFieldMissing.
    """

    code: int | None
    lines: int | None
    lon: int | None
    lat: int | None
    description: int | None = None

    @classmethod
    def resolve(
        cls, fields: Iterable[Mapping[str, Any]], *, source: str = "<batch>"
    ) -> StopColumns:
        index: dict[str, int] = {}
        for i, f in enumerate(fields):
            field_id = f.get("id") if isinstance(f, Mapping) else None
            if isinstance(field_id, str):
                index[field_id] = i

        description = next(
            (index[name] for name in DESCRIPTION_FIELDS if name in index), None
        )
        if description is None:
            logger.warning(
                "No description field found in %s; using %r",
                source,
                UNKNOWN_DESCRIPTION,
            )

        return cls(
            code=index.get(CODE_FIELD),
            lines=index.get(LINES_FIELD),
            lon=index.get(LON_FIELD),
            lat=index.get(LAT_FIELD),
            description=description,
        )


def _value(record: Sequence[Any], idx: int | None, name: str) -> Any:
    if idx is None:
        raise RecordFieldMissing(f"Field {name!r} is not declared")
    if idx >= len(record):
        raise RecordFieldMissing(f"Field {name!r} is missing from record")
    value = record[idx]
    if value is None:
        raise RecordFieldMissing(f"Field {name!r} is null")
    return value


def _coordinate(record: Sequence[Any], idx: int | None, name: str) -> float:
    raw = _value(record, idx, name)
    if isinstance(raw, bool):
        raise RecordFieldMissing(f"Field {name!r} is not numeric: {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError) as e:
        raise RecordFieldMissing(f"Field {name!r} is not numeric: {raw!r}") from e
    if not math.isfinite(value):
        raise RecordFieldMissing(f"Field {name!r} is not finite: {raw!r}")
    return value


def split_lines(raw: str) -> tuple[str, ...]:
    # Blank entries are kept as-is; the source data is not cleaned up here.
    return tuple(raw.split(","))


def stop_from_record(record: Sequence[Any], columns: StopColumns) -> Stop:
    """Map one positional record to a Stop, or raise RecordFieldMissing."""

    if isinstance(record, (str, bytes)) or not isinstance(record, Sequence):
        raise RecordFieldMissing(f"Record is not an array: {record!r}")

    code = str(_value(record, columns.code, CODE_FIELD))
    lines = split_lines(str(_value(record, columns.lines, LINES_FIELD)))
    lon = _coordinate(record, columns.lon, LON_FIELD)
    lat = _coordinate(record, columns.lat, LAT_FIELD)

    if columns.description is None:
        description = UNKNOWN_DESCRIPTION
    else:
        description = str(_value(record, columns.description, "description"))

    try:
        position = GeoPoint(lat=lat, lon=lon)
    except ValueError as e:
        raise RecordFieldMissing(str(e)) from e

    return Stop(code=code, description=description, lines=lines, position=position)
