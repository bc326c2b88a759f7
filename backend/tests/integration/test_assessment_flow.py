"""Integration tests for a full answering and finalization flow."""

import json
import logging

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_answer_cascade_and_finalize(client: AsyncClient, make_answers):
    """Walk the whole questionnaire through the HTTP surface."""
    answers = make_answers(value=75)
    # Vary one item so domain 1 is not a uniform pattern
    answers[1]["valor"] = 100

    item_map = {row["item"]: row["valor"] for row in answers}
    cascade = await client.post("/api/cascade/evaluate", json={"respostas": item_map})
    assert cascade.status_code == 200
    assert cascade.json()["total_visible"] == 70

    incomplete = await client.post(
        "/api/assessments/finalize-check",
        json={"respostas": answers[:-1]},
    )
    assert incomplete.status_code == 400
    assert incomplete.json()["details"] == {"answered": 69, "required": 70}

    completed = await client.post(
        "/api/assessments/finalize-check",
        json={"respostas": answers},
    )
    assert completed.status_code == 200
    data = completed.json()
    assert data["outcome"] == "completed"
    assert len(data["results"]) == 10

    first = data["results"][0]
    assert first["domain_id"] == 1
    assert first["score"] == 77.27
    assert first["category"] == "alto"
    assert first["anomaly"]["is_anomalous"] is False


@pytest.mark.asyncio
async def test_finalize_ignores_cascade_visibility(client: AsyncClient, make_answers):
    """Hidden cascade items still count towards the required total."""
    answers = [row for row in make_answers(value=0) if row["item"] not in {"Q57", "Q58"}]

    response = await client.post("/api/assessments/finalize-check", json={"respostas": answers})

    assert response.status_code == 400
    assert response.json()["error"] == "assessment_incomplete"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


@pytest.mark.asyncio
async def test_finalize_logs_carry_assessment_id(small_client: AsyncClient, caplog):
    caplog.set_level(logging.INFO, logger="copsoq")

    await small_client.post(
        "/api/assessments/finalize-check",
        json={"avaliacao_id": 314, "respostas": []},
        headers={"X-Request-ID": "req-finalize"},
    )

    decisions = [
        json.loads(r.getMessage())
        for r in caplog.records
        if r.name == "copsoq.services.results_service"
    ]
    assert decisions[-1]["event"] == "finalize_decision"
    assert decisions[-1]["assessment_id"] == "314"
    assert decisions[-1]["request_id"] == "req-finalize"
