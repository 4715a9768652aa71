"""Tests for the HTTP decode endpoints."""

import pytest
from fastapi.testclient import TestClient

from server.main import app

GGA = "$GPGGA,002153.000,3342.6618,N,11751.3858,W,1,10,1.2,27.0,M,-34.2,M,,0000*5E"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_decode_sentence(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": GGA})
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "gga"
    assert data["gnss_mode"] == "GPS"
    assert data["location"]["lat"] == pytest.approx(33.71103, abs=1e-6)
    assert data["location"]["time_of_day_ms"] == 1313000


def test_decode_with_crlf(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": GGA + "\r\n"})
    assert response.status_code == 200


def test_format_error(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": "$GNGSA,A,3,65*01"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error"] == "format"
    assert detail["sentence"] == "$GNGSA,A,3,65*01"


def test_checksum_ignored_by_default(client: TestClient) -> None:
    response = client.post("/sentences", json={"sentence": GGA[:-2] + "00"})
    assert response.status_code == 200


def test_checksum_mismatch(client: TestClient) -> None:
    response = client.post(
        "/sentences",
        json={"sentence": GGA[:-2] + "00", "verify_checksum": True},
    )
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "checksum_mismatch"


def test_compute_checksum(client: TestClient) -> None:
    response = client.get(
        "/checksum",
        params={"text": "GNGSA,M,1,65,67,80,81,82,88,66,,,,,,1.2,0.7,1.0"},
    )
    assert response.json() == {"checksum": "2E", "value": 0x2E}


@pytest.mark.parametrize(
    ("sentence", "mode"),
    [("$GNGSA,A,3,65", "GNSS"), ("$CQGSA,A,3,65", "QZSS"), ("$XXGSA,A,3,65", "OTHER")],
)
def test_gnss_mode(client: TestClient, sentence: str, mode: str) -> None:
    response = client.get("/gnss-mode", params={"sentence": sentence})
    assert response.json() == {"gnss_mode": mode}
