def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_create_and_get_report(client):
    r = client.post("/reports", json={"title": "Bridge inspection"})
    assert r.status_code == 201
    created = r.json()
    assert created["title"] == "Bridge inspection"
    assert "createdAt" in created

    r = client.get(f"/reports/{created['id']}")
    assert r.status_code == 200
    assert r.json()["photos"] == []

    ids = [x["id"] for x in client.get("/reports").json()]
    assert created["id"] in ids


def test_report_lists_uploaded_photos(client, report):
    client.post(f"/reports/{report.id}/photos", files={"file": ("a.png", b"png", "image/png")}, data={"caption": "c1"})
    photos = client.get(f"/reports/{report.id}").json()["photos"]
    assert len(photos) == 1
    assert photos[0]["caption"] == "c1"


def test_get_missing_report(client):
    r = client.get("/reports/does-not-exist")
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "Report not found"


def test_create_report_validation(client):
    r = client.post("/reports", json={"title": ""})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_error_body_carries_request_id(client):
    r = client.delete("/photos/missing", headers={"X-Request-ID": "req-123"})
    assert r.status_code == 404
    assert r.json()["error"]["requestId"] == "req-123"
    assert r.headers["X-Request-ID"] == "req-123"


def test_request_id_generated(client):
    r = client.get("/reports/nope")
    rid = r.json()["error"]["requestId"]
    assert rid
    assert r.headers["X-Request-ID"] == rid


def test_unknown_route(client):
    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"
