"""Contract tests for results endpoints."""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_compute_results_returns_200(small_client: AsyncClient):
    """POST /results/compute returns one result per domain."""
    response = await small_client.post(
        "/api/results/compute",
        json={
            "respostas": [
                {"grupo": 1, "item": "Q1", "valor": 75},
                {"grupo": 1, "item": "Q2", "valor": 100},
                {"grupo": 2, "item": "Q3", "valor": 25},
                {"grupo": 2, "item": "Q4", "valor": 25},
            ]
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["answered"] == 4
    first, second = data["results"]
    assert first["score"] == 87.5
    assert first["category"] == "alto"
    assert first["color"] == "vermelho"
    assert first["color_hex"] == "#EF4444"
    assert second["score"] == 25
    assert second["label"] == "Precisa Melhorar"
    assert data["flagged_domains"] == [2]


@pytest.mark.asyncio
async def test_compute_results_rejects_off_scale_value(small_client: AsyncClient):
    """Values outside the response scale are rejected with 422."""
    response = await small_client.post(
        "/api/results/compute",
        json={"respostas": [{"grupo": 1, "item": "Q1", "valor": 60}]},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_compute_results_without_answers(small_client: AsyncClient):
    response = await small_client.post("/api/results/compute", json={"respostas": []})

    assert response.status_code == 200
    assert [r["category"] for r in response.json()["results"]] == [
        "nao_respondido",
        "nao_respondido",
    ]


@pytest.mark.asyncio
async def test_compute_results_refuses_unscaled_value(small_client: AsyncClient):
    """Only stored scale values are scored over HTTP; 80 is rejected."""
    response = await small_client.post(
        "/api/results/compute",
        json={
            "respostas": [
                {"grupo": 1, "item": "Q1", "valor": 75},
                {"grupo": 1, "item": "Q2", "valor": 80},
            ]
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"][0]["input"] == 80
