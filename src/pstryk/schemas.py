"""Pydantic models describing query parameters for the Pstryk endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "EnergyUsageQueryParams",
    "EnergyUsageResolution",
    "MeterQueryParams",
    "MeterResolution",
    "PricingQueryParams",
    "PricingResolution",
    "format_timestamp",
]

MeterResolution = Literal["hour", "day", "week", "month"]
EnergyUsageResolution = Literal["hour", "day", "week", "month", "year"]
PricingResolution = Literal["hour", "day", "month", "year"]


def format_timestamp(value: str | datetime) -> str:
    """Render a window bound the way the API expects it.

    Strings are passed through untouched. Datetimes are converted to UTC and
    rendered with a trailing ``Z``; naive values are assumed to be UTC.

    Args:
        value: Timestamp string or datetime.

    Returns:
        The query-string representation of ``value``.
    """

    if isinstance(value, str):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


class _WindowQueryParams(BaseModel):
    """Fields shared by every integration endpoint."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    resolution: str = Field(..., description="Aggregation granularity.")
    window_start: str | datetime = Field(
        ...,
        description="Inclusive start of the query window (UTC).",
    )
    window_end: str | datetime | None = Field(
        default=None,
        description="Exclusive end of the query window (UTC).",
    )
    for_tz: str | None = Field(
        default=None,
        description="IANA timezone used to align buckets, e.g. 'Europe/Warsaw'.",
    )

    def to_query(self) -> dict[str, str]:
        """Return query-string parameters with unset optional fields omitted."""

        query = {
            "resolution": self.resolution,
            "window_start": format_timestamp(self.window_start),
        }
        if self.window_end is not None:
            query["window_end"] = format_timestamp(self.window_end)
        if self.for_tz is not None:
            query["for_tz"] = self.for_tz
        return query


class MeterQueryParams(_WindowQueryParams):
    """Parameters for the carbon footprint and energy cost endpoints."""

    resolution: MeterResolution  # type: ignore[assignment]


class EnergyUsageQueryParams(_WindowQueryParams):
    """Parameters for the energy usage endpoint, which also accepts ``year``."""

    resolution: EnergyUsageResolution  # type: ignore[assignment]


class PricingQueryParams(_WindowQueryParams):
    """Parameters for the pricing endpoints, which do not accept ``week``."""

    resolution: PricingResolution  # type: ignore[assignment]
