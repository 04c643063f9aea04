def test_health_check(client, store):
    store.create("a@x.com")

    response = client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["success"] is True
    assert payload["message"] == "Service is healthy"
    assert payload["status"] == "ok"
    assert payload["service"] == "Anant Polymers Contact API"
    assert payload["pendingOtps"] == 1


def test_root_info(client):
    response = client.get("/")
    assert response.status_code == 200
    payload = response.json()
    assert payload["app_name"] == "Anant Polymers Contact API"
    assert payload["version"] == "1.0.0"
    assert payload["docs_url"] == "/docs"
    assert payload["api_base"] == "/api"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}
