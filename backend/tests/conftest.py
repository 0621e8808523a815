import base64

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.utils.auth_utils import create_session_token
from sustainhub.core.config import settings

OWNER_OPEN_ID = "owner-open-id"

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FakeS3:
    def __init__(self):
        self.objects = {}

    def put_object(self, Bucket, Key, Body, ContentType):
        self.objects[Key] = {"bucket": Bucket, "body": Body, "content_type": ContentType}
        return {"ETag": '"fake"'}


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(settings, "OWNER_OPEN_ID", OWNER_OPEN_ID)
    monkeypatch.setattr(settings, "SMTP_SERVER", None)
    monkeypatch.setattr(settings, "ORDER_STRICT_TRANSITIONS", False)
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def fake_s3(monkeypatch):
    s3 = FakeS3()
    monkeypatch.setattr("app.utils.storage_utils.get_s3_client", lambda: s3)
    return s3


def auth_headers(open_id: str, name: str = "Test User", email: str = None) -> dict:
    token = create_session_token(open_id, name=name, email=email or f"{open_id}@example.com", login_method="email")
    return {"Cookie": f"{settings.SESSION_COOKIE_NAME}={token}"}


@pytest.fixture
def admin_headers():
    return auth_headers(OWNER_OPEN_ID, name="Owner")


@pytest.fixture
def user_headers():
    return auth_headers("user-1", name="Ana")


@pytest.fixture
def other_headers():
    return auth_headers("user-2", name="Bruno")


def png_base64(data_uri: bool = False) -> str:
    encoded = base64.b64encode(PNG_BYTES).decode()
    return f"data:image/png;base64,{encoded}" if data_uri else encoded


def make_product(client, headers, **overrides) -> int:
    payload = {
        "name": "Sementes Orgânicas de Milho",
        "description": "Sementes certificadas, livres de OGM",
        "price": 250,
        "category": "Sementes",
        "imageUrl": "https://example.com/milho.jpg",
        "stock": 50,
    }
    payload.update(overrides)
    res = client.post("/api/admin/products/", json=payload, headers=headers)
    assert res.status_code == 200, res.text
    return res.json()["id"]
