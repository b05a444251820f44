from dataclasses import dataclass, fields


class Unset:
    """Marks a patch field the caller did not send at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass(frozen=True)
class CurrencyPatch:
    # Each field is UNSET (leave alone), None (explicit null) or a value.
    display_name: str | None | Unset = UNSET
    symbol: str | None | Unset = UNSET

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is UNSET for f in fields(self))
