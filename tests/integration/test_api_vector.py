import pytest
from fastapi.testclient import TestClient

from numvec.main import app


@pytest.fixture
def client():
    # Entering the client runs the lifespan, so /ready reports ready
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_ready(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


def test_not_ready_outside_lifespan():
    r = TestClient(app).get("/ready")
    assert r.status_code == 503


def test_summary(client):
    r = client.post("/vector/summary", json={"values": [1, 5, 5, 2]})
    assert r.status_code == 200
    data = r.json()
    assert data["length"] == 4
    assert data["sum"] == 13
    assert data["median"] == 3.5
    assert data["max"] == {"indices": [1, 2]}
    assert data["min"] == {"value": 1}


def test_summary_empty_vector(client):
    r = client.post("/vector/summary", json={"values": []})
    assert r.status_code == 400
    assert r.json()["kind"] == "EmptyVectorError"


def test_summary_bad_request(client):
    r = client.post("/vector/summary", json={"values": ["x"], "extra": 1})
    assert r.status_code == 400
    assert "detail" in r.json()


def test_normalize(client):
    r = client.post("/vector/normalize", json={"values": [3, 4]})
    assert r.status_code == 200
    data = r.json()
    assert data["magnitude"] == 5
    assert data["values"] == pytest.approx([0.6, 0.8])


def test_dot(client):
    r = client.post("/vector/dot", json={"u": [1, 2, 3], "v": [4, 5, 6]})
    assert r.status_code == 200
    assert r.json()["result"] == 32


def test_cross(client):
    r = client.post("/vector/cross", json={"u": [1, 2, 3], "v": [4, 5, 6]})
    assert r.status_code == 200
    assert r.json()["values"] == [-3, 6, -3]


def test_cross_invalid_dimension(client):
    r = client.post("/vector/cross", json={"u": [1, 2], "v": [3, 4]})
    assert r.status_code == 400
    assert r.json()["kind"] == "InvalidDimensionError"


@pytest.mark.parametrize("path, expected", [
    ("/vector/add", [5, 7]),
    ("/vector/subtract", [-3, -3]),
    ("/vector/concat", [1, 2, 4, 5]),
])
def test_binary_operations(client, path, expected):
    r = client.post(path, json={"u": [1, 2], "v": [4, 5]})
    assert r.status_code == 200
    assert r.json()["values"] == expected


def test_size_mismatch(client):
    r = client.post("/vector/add", json={"u": [1, 2], "v": [1]})
    assert r.status_code == 400
    assert r.json()["kind"] == "SizeMismatchError"


def test_metrics(client):
    client.post("/vector/dot", json={"u": [1], "v": [1, 2]})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "numvec_request_total" in r.text
    assert 'numvec_vector_errors_total{kind="SizeMismatchError"}' in r.text


def test_summary_overflow(client):
    r = client.post("/vector/summary", json={"values": [1e200, 1e200]})
    assert r.status_code == 400
    assert r.json()["kind"] == "NonFiniteResultError"
