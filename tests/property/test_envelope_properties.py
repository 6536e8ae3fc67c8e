"""Property tests for envelope handling in the dispatcher.

Property 9: 2xx responses are returned verbatim.
Every non-2xx response raises ApiError carrying the HTTP status.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import RecordingBackend, protected_paths
from recruit_gateway.config.route_policies import RoutePolicies
from recruit_gateway.config.settings import GatewaySettings
from recruit_gateway.credentials.store import MemoryCredentialStore
from recruit_gateway.gateway.client import ApiClient
from recruit_gateway.gateway.errors import ApiError

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**31), max_value=2**31),
    st.text(max_size=20),
)
json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=8), children, max_size=4),
    ),
    max_leaves=10,
)
success_envelopes = st.fixed_dictionaries(
    {"success": st.just(True), "data": json_values},
    optional={
        "meta": st.fixed_dictionaries(
            {"page": st.integers(1, 50), "limit": st.integers(1, 100), "total": st.integers(0, 5000)}
        )
    },
)
success_statuses = st.sampled_from([200, 201, 202])
error_statuses = st.sampled_from([400, 403, 404, 409, 422, 429, 500, 502, 503])


def _send(status: int, body: Any, path: str, verb: str = "get") -> tuple[Any, ApiError | None]:
    result: list[Any] = []
    raised: list[ApiError] = []

    async def _run() -> None:
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(RecordingBackend(status, body)),
            base_url="https://app.example.com",
        ) as http:
            api = ApiClient(
                GatewaySettings(),
                credential_store=MemoryCredentialStore(),
                policies=RoutePolicies(),
                current_page=lambda: "/dashboard",
                http_client=http,
            )
            try:
                result.append(await getattr(api, verb)(path))
            except ApiError as exc:
                raised.append(exc)

    asyncio.run(_run())
    return (result[0] if result else None), (raised[0] if raised else None)


@settings(max_examples=100, deadline=None)
@given(
    status=success_statuses,
    envelope=success_envelopes,
    path=protected_paths,
    verb=st.sampled_from(["get", "post", "patch", "put", "delete"]),
)
def test_success_envelope_returned_verbatim(
    status: int, envelope: dict, path: str, verb: str
) -> None:
    result, error = _send(status, envelope, path, verb)

    assert error is None
    assert result == envelope


@settings(max_examples=100, deadline=None)
@given(
    status=error_statuses,
    message=st.one_of(st.none(), st.text(min_size=1, max_size=30)),
    path=protected_paths,
)
def test_error_statuses_raise_with_status(status: int, message: str | None, path: str) -> None:
    body: dict = {"success": False}
    if message is not None:
        body["error"] = message

    result, error = _send(status, body, path)

    assert result is None
    assert error is not None
    assert error.status == status
    assert error.message == (message or "Request failed")
