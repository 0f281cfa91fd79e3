"""
Glovebox API - Record Schemas
Rows read from the users, documents and cars tables
"""

from typing import Annotated, Optional, Union
from datetime import date, datetime, time, timezone
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict


RecordId = Union[int, str]


def _date_to_datetime(value):
    """date objects become midnight; strings are left to pydantic."""
    if value == "":
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes (including date-only values) are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[
    Optional[datetime],
    BeforeValidator(_date_to_datetime),
    AfterValidator(_as_utc),
]


class UserRecord(BaseModel):
    """Owner of documents and cars."""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    name: Optional[str] = None
    email: Optional[str] = None


class DocumentRecord(BaseModel):
    """Vehicle document (insurance, registration, inspection...)."""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    user_id: RecordId
    category: Optional[str] = None
    expiry_date: UtcDatetime = None


class CarRecord(BaseModel):
    """User vehicle."""
    model_config = ConfigDict(extra="ignore")

    id: RecordId
    user_id: RecordId
    brand: Optional[str] = None
    model: Optional[str] = None
    last_oil_change_date: UtcDatetime = None
    mileage: Optional[float] = None
