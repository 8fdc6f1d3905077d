"""Base model shared by every persisted record, with its JSON encoding."""

from __future__ import annotations

import re
from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def format_rfc3339nano(value: datetime) -> str:
    """Format a datetime as RFC 3339 with trailing fraction zeros dropped.

    Naive datetimes are taken to be UTC.
    """
    text = value.strftime("%Y-%m-%dT%H:%M:%S")
    fraction = f"{value.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_rfc3339nano(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; digits beyond microseconds are dropped."""
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tz
    )


def _json_field(
    key: str,
    default: Any = None,
    *,
    factory: Any = None,
    omitempty: bool = False,
    model: Any = None,
    time: bool = False,
) -> Any:
    """Declare a dataclass field with its JSON key and encoding hints.

    ``model`` may be a class or a zero-argument callable returning one,
    for references to classes defined later.
    """
    metadata = {"json": key, "omitempty": omitempty, "model": model, "time": time}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, datetime):
        return format_rfc3339nano(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _resolve_model(model: Any) -> Any:
    if model is None or isinstance(model, type):
        return model
    return model()


def _decode(meta: Any, value: Any) -> Any:
    if value is None:
        return None
    if meta.get("time"):
        return parse_rfc3339nano(value)
    model = _resolve_model(meta.get("model"))
    if model is not None:
        if isinstance(value, list):
            return [model.from_dict(item) for item in value]
        return model.from_dict(value)
    return value


@dataclass
class Model:
    """Common identity and timestamp columns."""

    id: int = _json_field("ID", 0, omitempty=True)
    created_at: datetime | None = _json_field("CreatedAt", None, time=True)
    updated_at: datetime | None = _json_field("UpdatedAt", None, time=True)
    deleted_at: datetime | None = _json_field("DeletedAt", None, time=True)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping of this record."""
        result: dict = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and not value:
                continue
            result[f.metadata.get("json", f.name)] = _encode(value)
        return result

    @classmethod
    def from_dict(cls, data: dict):
        """Build a record from its JSON mapping; missing keys keep defaults."""
        kwargs = {}
        for f in fields(cls):
            if not f.init:
                continue
            key = f.metadata.get("json", f.name)
            if key not in data:
                continue
            value = _decode(f.metadata, data[key])
            if value is None and f.default_factory is not MISSING:
                value = f.default_factory()
            kwargs[f.name] = value
        return cls(**kwargs)