import logging
import re
from collections.abc import Mapping
from datetime import datetime

from domain.models.currency import NOT_AVAILABLE, NormalizedRateEntry, NormalizedRates
from domain.models.rates import BpiEntry, RateSnapshot

logger = logging.getLogger(__name__)

OUTPUT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"

# Extended-format date and time joined by "T", with a "Z" or numeric offset.
ISO_OFFSET_DATE_TIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,9})?)?(Z|[+-]\d{2}:\d{2}(:\d{2})?)"
)


def format_update_time(iso_value: str) -> str:
    """Reformat an ISO-8601 timestamp as ``yyyy/MM/dd HH:mm:ss``.

    Wall-clock fields are taken in the timestamp's own offset. A value that
    is not a full date-time with an offset is returned unchanged.
    """
    if not ISO_OFFSET_DATE_TIME.fullmatch(iso_value):
        logger.error(f"Date-time string is not an offset date-time: {iso_value!r}. Returning original string.")
        return iso_value

    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        logger.error(
            f"Failed to parse date-time string: {iso_value!r}. Returning original string.",
            exc_info=True,
        )
        return iso_value
    return parsed.strftime(OUTPUT_TIME_FORMAT)


def _to_entry(bpi_entry: BpiEntry, lookup: Mapping[str, str]) -> NormalizedRateEntry:
    display_name = lookup.get(bpi_entry.code)
    if display_name is None:
        logger.warning(
            f"No currency mapping found for code: {bpi_entry.code}. Using {NOT_AVAILABLE!r}."
        )
        display_name = NOT_AVAILABLE

    return NormalizedRateEntry(
        code=bpi_entry.code,
        display_name=display_name,
        rate=bpi_entry.rate_float,
    )


def merge(snapshot: RateSnapshot, lookup: Mapping[str, str]) -> NormalizedRates:
    """Combine a rate snapshot with the code -> display name lookup.

    Every code in the snapshot yields exactly one entry, in the snapshot's
    own iteration order.
    """
    logger.debug("Starting transformation of rate snapshot")

    if snapshot.time is not None and snapshot.time.updated_iso is not None:
        formatted_time = format_update_time(snapshot.time.updated_iso)
    else:
        logger.warning("Rate snapshot is missing time information")
        formatted_time = NOT_AVAILABLE

    if snapshot.bpi is None:
        logger.warning("Rate snapshot is missing BPI information")
        entries: tuple[NormalizedRateEntry, ...] = ()
    else:
        entries = tuple(_to_entry(e, lookup) for e in snapshot.bpi.values())
        logger.debug(f"Transformation complete. Mapped {len(entries)} currency entries")

    return NormalizedRates(formatted_update_time=formatted_time, entries=entries)
