"""Budget tracking API client.

Thin typed wrapper over the gateway for ``/api/v2/vms/budgets``. Forecasts,
alert thresholds and consolidation are computed server-side; this module only
shapes requests and validates the envelope.
"""

from __future__ import annotations

from typing import Any

from recruit_gateway.gateway.client import ApiClient
from recruit_gateway.models.envelope import ApiResponse

BUDGETS_ENDPOINT = "/api/v2/vms/budgets"


class BudgetApi:
    """Budget endpoints. Every method returns the validated ``ApiResponse``."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    @staticmethod
    def _wrap(envelope: Any) -> ApiResponse[Any]:
        return ApiResponse[Any].model_validate(envelope)

    async def list(self, **query: Any) -> ApiResponse[Any]:
        """List budgets, e.g. ``list(status="ACTIVE", page=2, limit=20)``."""
        return self._wrap(await self._api.get(BUDGETS_ENDPOINT, query))

    async def get(self, budget_id: str) -> ApiResponse[Any]:
        return self._wrap(await self._api.get(f"{BUDGETS_ENDPOINT}/{budget_id}"))

    async def create(self, payload: dict[str, Any]) -> ApiResponse[Any]:
        return self._wrap(await self._api.post(BUDGETS_ENDPOINT, payload))

    async def update(self, budget_id: str, payload: dict[str, Any]) -> ApiResponse[Any]:
        return self._wrap(await self._api.patch(f"{BUDGETS_ENDPOINT}/{budget_id}", payload))

    async def delete(self, budget_id: str) -> ApiResponse[Any]:
        return self._wrap(await self._api.delete(f"{BUDGETS_ENDPOINT}/{budget_id}"))

    async def allocate(self, budget_id: str, payload: dict[str, Any]) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.post(f"{BUDGETS_ENDPOINT}/{budget_id}/allocate", payload)
        )

    async def transactions(
        self, budget_id: str, page: int | None = None, limit: int | None = None
    ) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.get(
                f"{BUDGETS_ENDPOINT}/{budget_id}/transactions",
                {"page": page, "limit": limit},
            )
        )

    async def create_transaction(
        self, budget_id: str, payload: dict[str, Any]
    ) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.post(f"{BUDGETS_ENDPOINT}/{budget_id}/transactions", payload)
        )

    async def forecast(self, budget_id: str, days: int = 30) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.get(f"{BUDGETS_ENDPOINT}/{budget_id}/forecast", {"days": days})
        )

    async def alerts(self, budget_id: str, triggered_only: bool = False) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.get(
                f"{BUDGETS_ENDPOINT}/{budget_id}/alerts", {"triggered": triggered_only}
            )
        )

    async def configure_alert(self, budget_id: str, payload: dict[str, Any]) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.post(f"{BUDGETS_ENDPOINT}/{budget_id}/alerts", payload)
        )

    async def hierarchy(self, root_budget_id: str | None = None) -> ApiResponse[Any]:
        return self._wrap(
            await self._api.get(
                f"{BUDGETS_ENDPOINT}/hierarchy", {"root_budget_id": root_budget_id}
            )
        )

    async def for_job(self, job_id: str) -> ApiResponse[Any]:
        return self._wrap(await self._api.get(f"{BUDGETS_ENDPOINT}/for-job/{job_id}"))
