import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

logger = logging.getLogger(__name__)


class SnapshotTime(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    updated: str | None = None
    updated_iso: str | None = Field(default=None, alias="updatedISO")
    updated_uk: str | None = Field(default=None, alias="updateduk")


class BpiEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str | None = None
    rate: str | None = None
    description: str | None = None
    rate_float: float


class RateSnapshot(BaseModel):
    """One fetched copy of the upstream price feed.

    ``bpi`` is keyed by currency code and the set of codes is open, so it is
    kept as a read-only mapping rather than named fields. Entries without a code
    or a float rate are left out of the mapping.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    disclaimer: str | None = None
    chart_name: str | None = Field(default=None, alias="chartName")
    time: SnapshotTime | None = None
    bpi: Mapping[str, BpiEntry] | None = None

    @field_validator("bpi", mode="before")
    @classmethod
    def drop_incomplete_entries(cls, v: Any):
        if not isinstance(v, Mapping):
            return v

        complete = {}
        for key, entry in v.items():
            if isinstance(entry, dict) and (
                entry.get("code") is None or entry.get("rate_float") is None
            ):
                logger.warning(f"Dropping incomplete rate entry for key {key!r}")
                continue
            complete[key] = entry
        return complete

    @field_validator("bpi")
    @classmethod
    def freeze_bpi(cls, v: Mapping[str, BpiEntry] | None):
        return None if v is None else MappingProxyType(dict(v))

    @field_serializer("bpi")
    def serialize_bpi(self, bpi: Mapping[str, BpiEntry] | None) -> dict[str, BpiEntry] | None:
        return None if bpi is None else dict(bpi)
