from dataclasses import dataclass
from datetime import datetime

CODE_MIN_LENGTH = 3
CODE_MAX_LENGTH = 10
DISPLAY_NAME_MAX_LENGTH = 50
SYMBOL_MAX_LENGTH = 10

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Currency:
    code: str
    display_name: str
    symbol: str | None
    created_at: datetime
    updated_at: datetime
    is_active: bool = True


@dataclass(frozen=True)
class NormalizedRateEntry:
    code: str
    display_name: str  # Resolved from the store, or "N/A"
    rate: float


@dataclass(frozen=True)
class NormalizedRates:
    formatted_update_time: str
    entries: tuple[NormalizedRateEntry, ...]
