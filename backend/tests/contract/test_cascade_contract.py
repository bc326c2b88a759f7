"""Contract tests for cascade endpoints."""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_evaluate_cascade_returns_200(client: AsyncClient):
    """POST /cascade/evaluate returns the visibility payload."""
    response = await client.post("/api/cascade/evaluate", json={"respostas": {}})

    assert response.status_code == 200
    data = response.json()
    assert data["visible_items"] == list(range(1, 57)) + [59, 65]
    assert data["total_visible"] == 58
    assert data["total_possible"] == 70
    assert set(data["by_category"]) == {"core", "behavioral", "financial"}
    assert "conditions_evaluated" in data


@pytest.mark.asyncio
async def test_evaluate_cascade_with_triggers(client: AsyncClient):
    """Harassment and lead answers reveal their follow-ups."""
    response = await client.post(
        "/api/cascade/evaluate",
        json={"respostas": {"Q56": 25, "Q65": 50, "Q59": None}},
    )

    assert response.status_code == 200
    data = response.json()
    assert 57 in data["visible_items"]
    assert 58 in data["visible_items"]
    assert data["by_category"]["financial"] == [65, 66, 67, 68, 69, 70]
    assert 60 not in data["visible_items"]


@pytest.mark.asyncio
async def test_evaluate_cascade_rejects_malformed_body(client: AsyncClient):
    """A non-object answer map is rejected at the boundary."""
    response = await client.post("/api/cascade/evaluate", json={"respostas": [1, 2]})

    assert response.status_code == 422
