"""
Shared base model for launch analyzer records.

Records are immutable and accept both snake_case field names and the
camelCase aliases used by the JSON documents fed to the analyzer.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalyzerModel(BaseModel):
    """Base class for all analyzer input and output records."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict:
        """Dump the record with camelCase keys and JSON-safe values."""
        return self.model_dump(by_alias=True, mode="json")


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Datetime that is always timezone aware
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
