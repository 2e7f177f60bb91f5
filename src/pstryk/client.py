"""Async client for the Pstryk integration API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Final, TypeVar, cast

import httpx

from pstryk.models import (
    MeterCarbonFootprintResponse,
    MeterPowerAggregatorResponse,
    MeterPowerCostResponse,
    TgePricingResponse,
)
from pstryk.schemas import (
    EnergyUsageQueryParams,
    MeterQueryParams,
    PricingQueryParams,
    _WindowQueryParams,
)
from pstryk.settings import DEFAULT_BASE_URL, PstrykSettings, get_settings

__all__ = ["PstrykClient", "PstrykConfigurationError", "REQUEST_TIMEOUT_SECONDS"]

LOGGER = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS: Final[float] = 10.0

_CARBON_FOOTPRINT_PATH: Final[str] = "/integrations/meter-data/carbon-footprint/"
_ENERGY_COST_PATH: Final[str] = "/integrations/meter-data/energy-cost/"
_ENERGY_USAGE_PATH: Final[str] = "/integrations/meter-data/energy-usage/"
_PRICING_PATH: Final[str] = "/integrations/pricing/"
_PROSUMER_PRICING_PATH: Final[str] = "/integrations/prosumer-pricing/"

_ParamsT = TypeVar("_ParamsT", bound=_WindowQueryParams)


class PstrykConfigurationError(ValueError):
    """Raised when the client cannot be configured, e.g. without a token."""


class PstrykClient:
    """Typed gateway to the Pstryk meter data and pricing endpoints.

    Every query method issues a single GET request and returns the decoded
    JSON body without transformation. Transport failures and non-2xx
    responses surface as the original :mod:`httpx` exceptions; the client
    does not retry or reclassify them.

    Example:
        >>> async with PstrykClient("token") as client:  # doctest: +SKIP
        ...     usage = await client.get_energy_usage(
        ...         {"resolution": "day", "window_start": "2025-04-18T00:00:00Z"}
        ...     )
    """

    def __init__(
        self,
        api_token: str | None,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client bound to ``base_url``.

        Args:
            api_token: Integration token. Sent as ``Authorization: sk-<token>``.
            base_url: Root URL of the API.
            transport: Optional transport override, e.g. ``httpx.MockTransport``.

        Raises:
            PstrykConfigurationError: If ``api_token`` is empty or missing.
        """

        if not api_token:
            raise PstrykConfigurationError("API token is required")

        self._base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=REQUEST_TIMEOUT_SECONDS,
            headers={
                "Authorization": f"sk-{api_token}",
                "Accept": "application/json",
            },
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: PstrykSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> PstrykClient:
        """Build a client from environment-backed settings.

        Raises:
            PstrykConfigurationError: If ``PSTRYK_API_TOKEN`` is not configured.
        """

        settings_obj = settings or get_settings()
        return cls(settings_obj.api_token, settings_obj.base_url, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the underlying connection pool."""

        await self._client.aclose()

    async def __aenter__(self) -> PstrykClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def get_carbon_footprint(
        self, params: MeterQueryParams | Mapping[str, object]
    ) -> MeterCarbonFootprintResponse:
        """Retrieve aggregated carbon footprint data (gCO2eq).

        Args:
            params: Query window; resolution is one of hour, day, week, month.
        """

        query = _coerce_params(MeterQueryParams, params)
        payload = await self._get(_CARBON_FOOTPRINT_PATH, query)
        return cast(MeterCarbonFootprintResponse, payload)

    async def get_energy_cost(
        self, params: MeterQueryParams | Mapping[str, object]
    ) -> MeterPowerCostResponse:
        """Retrieve aggregated energy cost data (PLN).

        Args:
            params: Query window; resolution is one of hour, day, week, month.
        """

        query = _coerce_params(MeterQueryParams, params)
        payload = await self._get(_ENERGY_COST_PATH, query)
        return cast(MeterPowerCostResponse, payload)

    async def get_energy_usage(
        self, params: EnergyUsageQueryParams | Mapping[str, object]
    ) -> MeterPowerAggregatorResponse:
        """Retrieve aggregated energy usage data (kWh).

        Args:
            params: Query window; resolution is one of hour, day, week, month,
                year.
        """

        query = _coerce_params(EnergyUsageQueryParams, params)
        payload = await self._get(_ENERGY_USAGE_PATH, query)
        return cast(MeterPowerAggregatorResponse, payload)

    async def get_pricing(
        self, params: PricingQueryParams | Mapping[str, object]
    ) -> TgePricingResponse:
        """Retrieve energy prices for consumer accounts.

        Args:
            params: Query window; resolution is one of hour, day, month, year.
        """

        query = _coerce_params(PricingQueryParams, params)
        payload = await self._get(_PRICING_PATH, query)
        return cast(TgePricingResponse, payload)

    async def get_prosumer_pricing(
        self, params: PricingQueryParams | Mapping[str, object]
    ) -> TgePricingResponse:
        """Retrieve energy prices for prosumer accounts.

        Args:
            params: Query window; resolution is one of hour, day, month, year.
        """

        query = _coerce_params(PricingQueryParams, params)
        payload = await self._get(_PROSUMER_PRICING_PATH, query)
        return cast(TgePricingResponse, payload)

    async def _get(self, path: str, query: dict[str, str]) -> object:
        LOGGER.debug("Pstryk request", extra={"path": path, "query": query})
        response = await self._client.get(path, params=query)
        response.raise_for_status()
        return response.json()


def _coerce_params(
    model: type[_ParamsT], params: _ParamsT | Mapping[str, object]
) -> dict[str, str]:
    """Validate ``params`` against ``model`` and return the query mapping.

    Raises:
        pydantic.ValidationError: If a mapping carries an unsupported
            resolution or unknown keys.
    """

    if isinstance(params, model):
        return params.to_query()
    if isinstance(params, _WindowQueryParams):
        params = params.model_dump(exclude_none=True)
    return model.model_validate(params).to_query()
