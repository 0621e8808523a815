def test_consultation_lifecycle(client, admin_headers, user_headers):
    res = client.post(
        "/api/consultations/",
        json={"title": "Análise de solo", "description": "Solo arenoso", "scheduledDate": "2026-11-02T10:00:00Z"},
        headers=user_headers,
    )
    assert res.status_code == 200, res.text
    consultation_id = res.json()["id"]

    mine = client.get("/api/consultations/mine", headers=user_headers).json()
    assert [c["status"] for c in mine] == ["pending"]

    res = client.patch(
        f"/api/consultations/{consultation_id}/status", json={"status": "approved"}, headers=admin_headers
    )
    assert res.status_code == 200
    assert client.get("/api/consultations/", headers=admin_headers).json()[0]["status"] == "approved"


def test_consultation_admin_routes(client, user_headers, admin_headers):
    assert client.get("/api/consultations/", headers=user_headers).status_code == 403
    res = client.patch("/api/consultations/99/status", json={"status": "completed"}, headers=admin_headers)
    assert res.status_code == 500


def test_consultation_needs_title(client, user_headers):
    res = client.post("/api/consultations/", json={"title": "", "description": "x"}, headers=user_headers)
    assert res.status_code == 422
