"""Contract tests for assessment finalization endpoints."""
import pytest
from httpx import AsyncClient

FULL_ANSWERS = [
    {"grupo": 1, "item": "Q1", "valor": 50},
    {"grupo": 1, "item": "Q2", "valor": 75},
    {"grupo": 2, "item": "Q3", "valor": 100},
    {"grupo": 2, "item": "Q4", "valor": 75},
]


@pytest.mark.asyncio
async def test_finalize_complete_returns_200(small_client: AsyncClient):
    """POST /assessments/finalize-check returns the decision with results."""
    response = await small_client.post(
        "/api/assessments/finalize-check",
        json={"status": "em_andamento", "respostas": FULL_ANSWERS},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "completed"
    assert data["status"] == "concluida"
    assert data["answered"] == data["required"] == 4
    assert len(data["results"]) == 2


@pytest.mark.asyncio
async def test_finalize_incomplete_returns_400(small_client: AsyncClient):
    """An incomplete assessment yields an ErrorResponse body."""
    response = await small_client.post(
        "/api/assessments/finalize-check",
        json={"respostas": FULL_ANSWERS[:3]},
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "assessment_incomplete"
    assert data["message"].startswith("A avaliação não está completa")
    assert data["details"] == {"answered": 3, "required": 4}


@pytest.mark.asyncio
async def test_finalize_locked_returns_409(small_client: AsyncClient):
    """Completed assessments cannot be finalized again."""
    response = await small_client.post(
        "/api/assessments/finalize-check",
        json={"status": "concluida", "respostas": FULL_ANSWERS},
    )

    assert response.status_code == 409
    data = response.json()
    assert data["error"] == "assessment_locked"
    assert data["details"]["status"] == "concluida"


@pytest.mark.asyncio
async def test_finalize_invalid_status_returns_422(small_client: AsyncClient):
    response = await small_client.post(
        "/api/assessments/finalize-check",
        json={"status": "aberta", "respostas": []},
    )
    assert response.status_code == 422
