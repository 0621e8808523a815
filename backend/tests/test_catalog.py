from datetime import datetime, timedelta, timezone

from conftest import make_product

EVENT = {
    "titlePt": "Feira Orgânica",
    "titleEn": "Organic Fair",
    "descriptionPt": "Feira de produtores",
    "descriptionEn": "Growers fair",
    "location": "Maputo",
    "category": "Feira",
}

POST = {
    "titlePt": "Compostagem",
    "titleEn": "Composting",
    "excerptPt": "Aprenda a fazer compostagem",
    "excerptEn": "Learn how to compost",
    "contentPt": "Conteúdo",
    "contentEn": "Content",
    "author": "Admin",
    "category": "Sustentabilidade",
    "imageUrl": "https://example.com/c.jpg",
    "readTime": 4,
}


def test_products_filter_by_category(client, admin_headers):
    make_product(client, admin_headers, category="Sementes")
    make_product(client, admin_headers, name="Mel Silvestre", category="Produtos Frescos")

    assert len(client.get("/api/products/").json()) == 2
    fresh = client.get("/api/products/", params={"category": "Produtos Frescos"}).json()
    assert [p["name"] for p in fresh] == ["Mel Silvestre"]


def test_unpublished_posts_are_hidden(client, admin_headers):
    draft = client.post("/api/admin/blog/", json=POST, headers=admin_headers).json()["id"]
    live = client.post("/api/admin/blog/", json={**POST, "published": True}, headers=admin_headers).json()["id"]

    assert [p["id"] for p in client.get("/api/blog-posts/").json()] == [live]
    assert client.get(f"/api/blog-posts/{draft}").status_code == 404
    assert len(client.get("/api/admin/blog/", headers=admin_headers).json()) == 2


def test_unavailable_services_are_hidden(client, admin_headers):
    service = {
        "titlePt": "Treinamento", "titleEn": "Training",
        "descriptionPt": "Workshop", "descriptionEn": "Workshop",
        "specialist": "Prof. Costa", "price": 200, "priceType": "daily", "available": False,
    }
    service_id = client.post("/api/admin/services/", json=service, headers=admin_headers).json()["id"]

    assert client.get("/api/services/").json() == []
    assert client.get(f"/api/services/{service_id}").status_code == 404


def test_events_are_published_and_sorted_by_date(client, admin_headers):
    later = client.post(
        "/api/admin/events/",
        json={**EVENT, "eventDate": "2026-12-05T14:00:00Z", "published": True},
        headers=admin_headers,
    ).json()["id"]
    sooner = client.post(
        "/api/admin/events/",
        json={**EVENT, "eventDate": "2026-11-14T09:00:00Z", "published": True},
        headers=admin_headers,
    ).json()["id"]
    client.post("/api/admin/events/", json={**EVENT, "eventDate": "2026-10-01T09:00:00Z"}, headers=admin_headers)

    assert [e["id"] for e in client.get("/api/events/").json()] == [sooner, later]


def test_news_newest_first(client, admin_headers):
    item = {
        "titlePt": "Notícia", "titleEn": "News",
        "summaryPt": "Resumo", "summaryEn": "Summary",
        "contentPt": "Conteúdo", "contentEn": "Content",
        "category": "Agricultura", "published": True,
    }
    older = client.post(
        "/api/admin/news/", json={**item, "publishedAt": "2026-09-01T08:00:00Z"}, headers=admin_headers
    ).json()["id"]
    newer = client.post(
        "/api/admin/news/", json={**item, "publishedAt": "2026-09-20T08:00:00Z"}, headers=admin_headers
    ).json()["id"]

    assert [n["id"] for n in client.get("/api/news/").json()] == [newer, older]
    assert client.get(f"/api/news/{older}").json()["summaryEn"] == "Summary"


def test_missing_product_is_not_found(client):
    res = client.get("/api/products/31337")
    assert res.status_code == 404
    assert res.json()["error"] == {"code": "NOT_FOUND", "message": "Product not found"}


def test_health(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_admin_can_clear_optional_fields(client, admin_headers):
    event_id = client.post(
        "/api/admin/events/",
        json={**EVENT, "eventDate": "2026-11-14T09:00:00Z", "imageUrl": "https://example.com/f.jpg",
              "maxParticipants": 300},
        headers=admin_headers,
    ).json()["id"]

    res = client.patch(
        f"/api/admin/events/{event_id}",
        json={"imageUrl": None, "maxParticipants": None, "titlePt": None},
        headers=admin_headers,
    )
    assert res.status_code == 200, res.text

    event = client.get(f"/api/admin/events/{event_id}", headers=admin_headers).json()
    assert event["imageUrl"] is None
    assert event["maxParticipants"] is None
    assert event["titlePt"] == "Feira Orgânica"
    assert event["location"] == "Maputo"


def test_timestamps_are_utc(client, admin_headers):
    event_id = client.post(
        "/api/admin/events/",
        json={**EVENT, "eventDate": "2026-11-14T11:00:00+02:00"},
        headers=admin_headers,
    ).json()["id"]

    event = client.get(f"/api/admin/events/{event_id}", headers=admin_headers).json()
    event_date = datetime.fromisoformat(event["eventDate"].replace("Z", "+00:00"))
    created_at = datetime.fromisoformat(event["createdAt"].replace("Z", "+00:00"))
    assert event_date == datetime(2026, 11, 14, 9, 0, tzinfo=timezone.utc)
    assert event_date.utcoffset() == timedelta(0)
    assert created_at.utcoffset() == timedelta(0)
