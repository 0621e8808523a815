def seed(client, admin_headers):
    res = client.post("/api/seed/all", headers=admin_headers)
    assert res.status_code == 200, res.text
    return res.json()


def test_seed_requires_admin(client, user_headers):
    assert client.post("/api/seed/all", headers=user_headers).status_code == 403


def test_seed_inserts_catalog(client, admin_headers):
    assert seed(client, admin_headers) == {"success": True, "message": "Database seeded successfully!"}

    assert len(client.get("/api/products/").json()) == 6
    assert len(client.get("/api/blog-posts/").json()) == 3
    assert len(client.get("/api/services/").json()) == 3
    assert len(client.get("/api/events/").json()) == 2
    assert len(client.get("/api/news/").json()) == 2


def test_search_is_case_insensitive(client, admin_headers):
    seed(client, admin_headers)

    results = client.get("/api/search", params={"query": "MEL"}).json()
    assert {"title": "Mel Silvestre", "type": "marketplace"} in [
        {"title": r["title"], "type": r["type"]} for r in results
    ]


def test_search_covers_blog_and_services(client, admin_headers):
    seed(client, admin_headers)

    blog = client.get("/api/search", params={"query": "composting"}).json()
    assert any(r["type"] == "blog" and r["href"] == "/knowledge" for r in blog)

    services = client.get("/api/search", params={"query": "santos"}).json()
    assert [(r["type"], r["category"]) for r in services] == [("services", "Serviço")]


def test_search_needs_a_query(client):
    assert client.get("/api/search", params={"query": ""}).status_code == 422
    assert client.get("/api/search").status_code == 422


def test_search_without_matches(client, admin_headers):
    seed(client, admin_headers)
    assert client.get("/api/search", params={"query": "zzz-nothing"}).json() == []
