import datetime
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SourceRecord(BaseModel):
    """
    A catalog record to convert.

    Maps attribute names to ordered lists of values. Values keep their
    runtime type (str, datetime, int, float); lookups filter by type so a
    wrongly typed value reads the same as an absent one.
    """

    attributes: dict[str, list[Any]] = Field(
        default_factory=dict,
        description="Attribute name to ordered values. Scalars become 1-item lists.",
    )
    source_id: str | None = Field(
        default=None,
        description="Identifier of the catalog source the record came from.",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    # ----- validators --------------------------------------------------------
    @field_validator("attributes", mode="before")
    @classmethod
    def _wrap_scalars(cls, v: Any) -> Any:
        if not isinstance(v, Mapping):
            return v
        wrapped: dict[str, list[Any]] = {}
        for name, value in v.items():
            if value is None:
                wrapped[name] = []
            elif isinstance(value, list | tuple):
                wrapped[name] = list(value)
            else:
                wrapped[name] = [value]
        return wrapped

    @classmethod
    def from_mapping(
        cls, attributes: Mapping[str, Any], source_id: str | None = None
    ) -> "SourceRecord":
        """Build a record from a plain mapping of attribute values."""
        return cls(attributes=dict(attributes), source_id=source_id)

    # ----- lookups -----------------------------------------------------------
    def has(self, name: str) -> bool:
        """True if the attribute is set, even with no usable values."""
        return name in self.attributes

    def get_values(self, name: str) -> list[Any]:
        """All non-null values of an attribute, in order."""
        return [value for value in self.attributes.get(name, []) if value is not None]

    def get_value(self, name: str) -> Any:
        """The first non-null value of an attribute, or None."""
        values = self.get_values(name)
        return values[0] if values else None

    def get_string(self, name: str) -> str | None:
        """The first value if it is a string, otherwise None."""
        value = self.get_value(name)
        return value if isinstance(value, str) else None

    def get_strings(self, name: str) -> list[str]:
        """All string values of an attribute."""
        return [value for value in self.get_values(name) if isinstance(value, str)]

    def get_date(self, name: str) -> datetime.datetime | None:
        """The first value if it is a datetime, otherwise None."""
        value = self.get_value(name)
        return value if isinstance(value, datetime.datetime) else None

    def get_dates(self, name: str) -> list[datetime.datetime]:
        """All datetime values of an attribute."""
        return [
            value
            for value in self.get_values(name)
            if isinstance(value, datetime.datetime)
        ]

    def get_numbers(self, name: str) -> list[float]:
        """All int or float values of an attribute, as floats."""
        return [
            float(value)
            for value in self.get_values(name)
            if isinstance(value, int | float) and not isinstance(value, bool)
        ]
