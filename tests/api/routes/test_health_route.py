"""Testes do health check."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from api.routes.health.router import health_check


@pytest.mark.asyncio
async def test_health_check_reports_transport() -> None:
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(transport="polling")))

    response = await health_check(request)  # type: ignore[arg-type]

    assert response.status == "healthy"
    assert response.service == "telegrafo"
    assert response.transport == "polling"
