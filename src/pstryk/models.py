"""Response shapes returned by the Pstryk integration endpoints.

The client hands back the decoded JSON body as-is, so these are plain
``TypedDict`` definitions rather than validating models. Timestamps are UTC
ISO-8601 strings exactly as the API sends them.
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

__all__ = [
    "MeterCarbonFootprintFrame",
    "MeterCarbonFootprintResponse",
    "MeterPowerAggregatorResponse",
    "MeterPowerCostFrame",
    "MeterPowerCostResponse",
    "MeterPowerUsageFrame",
    "TgePricingFrame",
    "TgePricingResponse",
]


class MeterCarbonFootprintFrame(TypedDict):
    """Carbon footprint for one time bucket, in gCO2eq."""

    start: str
    end: str
    is_live: bool
    carbon_footprint: float | None


class MeterCarbonFootprintResponse(TypedDict):
    resolution: str
    frames: list[MeterCarbonFootprintFrame]
    carbon_footprint_total: float


class MeterPowerCostFrame(TypedDict):
    """Energy cost for one time bucket, in PLN."""

    start: str
    end: str
    is_live: bool
    fae_cost: float | None
    energy_sold_value: float | None  # gross
    energy_balance_value: float | None


class MeterPowerCostResponse(TypedDict):
    resolution: str
    frames: list[MeterPowerCostFrame]
    fae_total_cost: float
    total_energy_sold_value: float
    total_energy_balance_value: float


class MeterPowerUsageFrame(TypedDict):
    """Energy drawn (FAE) and returned (RAE) for one time bucket, in kWh."""

    start: str
    end: str
    is_live: bool
    fae_usage: float | None
    rae: float | None
    energy_balance: float | None


class MeterPowerAggregatorResponse(TypedDict):
    resolution: str
    frames: list[MeterPowerUsageFrame]
    fae_total_usage: float
    rae_total: float
    energy_balance: float


class TgePricingFrame(TypedDict):
    """Exchange-based price for one time bucket, in PLN/kWh.

    Hourly frames carry ``price_net``/``price_gross``; coarser resolutions
    carry the ``*_avg`` variants instead.
    """

    start: str
    end: str
    is_live: bool
    is_cheap: bool
    is_expensive: bool
    price_net: NotRequired[float | None]
    price_gross: NotRequired[float | None]
    price_net_avg: NotRequired[float | None]
    price_gross_avg: NotRequired[float | None]


class TgePricingResponse(TypedDict):
    price_net_avg: float
    price_gross_avg: float
    frames: list[TgePricingFrame]
