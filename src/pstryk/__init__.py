"""Async Python client for the Pstryk energy data API."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "EnergyUsageQueryParams",
    "MeterCarbonFootprintResponse",
    "MeterPowerAggregatorResponse",
    "MeterPowerCostResponse",
    "MeterQueryParams",
    "PricingQueryParams",
    "PstrykClient",
    "PstrykConfigurationError",
    "PstrykSettings",
    "TgePricingResponse",
]

if TYPE_CHECKING:
    from .client import PstrykClient, PstrykConfigurationError
    from .models import (
        MeterCarbonFootprintResponse,
        MeterPowerAggregatorResponse,
        MeterPowerCostResponse,
        TgePricingResponse,
    )
    from .schemas import EnergyUsageQueryParams, MeterQueryParams, PricingQueryParams
    from .settings import PstrykSettings


def __getattr__(name: str) -> Any:
    """Lazily import submodules so ``import pstryk`` stays cheap."""

    module_map = {
        "PstrykClient": "client",
        "PstrykConfigurationError": "client",
        "MeterCarbonFootprintResponse": "models",
        "MeterPowerAggregatorResponse": "models",
        "MeterPowerCostResponse": "models",
        "TgePricingResponse": "models",
        "EnergyUsageQueryParams": "schemas",
        "MeterQueryParams": "schemas",
        "PricingQueryParams": "schemas",
        "PstrykSettings": "settings",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
