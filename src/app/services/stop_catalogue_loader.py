from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from src.app.ports.output import IStopBatchReader
from src.domain.algorithms.stop_records import StopColumns, stop_from_record
from src.domain.exceptions import CatalogueLoadError, RecordFieldMissing
from src.domain.models import Stop, StopCatalogue

logger = logging.getLogger(__name__)

SURFACE_STOPS_BATCH = "ds534_tpl_fermate.json"
METRO_STOPS_BATCH = "ds535_tpl_metrofermate.json"
DEFAULT_BATCHES = (SURFACE_STOPS_BATCH, METRO_STOPS_BATCH)


def _list_field(payload: Mapping[str, Any], key: str, name: str) -> Sequence[Any]:
    value = payload.get(key)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise CatalogueLoadError(f"Batch {name} has no {key!r} array")
    return value


def stops_from_batch(payload: Mapping[str, Any], *, name: str) -> list[Stop]:
    """Map a whole batch, skipping (and logging) records that cannot be mapped."""

    if not isinstance(payload, Mapping):
        raise CatalogueLoadError(f"Batch {name} is not a JSON object")

    fields = _list_field(payload, "fields", name)
    records = _list_field(payload, "records", name)

    columns = StopColumns.resolve(fields, source=name)

    stops: list[Stop] = []
    for i, record in enumerate(records):
        try:
            stops.append(stop_from_record(record, columns))
        except RecordFieldMissing as e:
            logger.warning("Skipping record %d of %s: %s", i, name, e)
    return stops


def load_batch(reader: IStopBatchReader, name: str) -> list[Stop]:
    try:
        payload = reader.read_batch(name)
    except (OSError, ValueError) as e:
        raise CatalogueLoadError(f"Unable to read batch {name}: {e}") from e
    return stops_from_batch(payload, name=name)


def load_stop_catalogue(
    reader: IStopBatchReader, batches: Iterable[str] = DEFAULT_BATCHES
) -> StopCatalogue:
    """Merge the batches in order; a failing batch contributes zero stops."""

    stops: list[Stop] = []
    for name in batches:
        try:
            stops.extend(load_batch(reader, name))
        except Exception:  # confined to this batch; logged with traceback
            logger.exception("Error loading stops from %s", name)

    logger.info("Loaded %d ATM stops", len(stops))
    return StopCatalogue(stops=tuple(stops))
