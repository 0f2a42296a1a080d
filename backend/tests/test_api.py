"""
Тесты HTTP API
"""
import pytest
from decimal import Decimal

from sqlalchemy.exc import OperationalError

from thriftshare.models import User
from thriftshare.services.badge_service import BadgeService
from thriftshare.services.ledger_service import LedgerService
from thriftshare.utils.auth import create_access_token

API = "/api/v1"
IMAGE = ("find.jpg", b"\xff\xd8\xff\xe0fake-jpeg", "image/jpeg")


async def create_post(client, headers, **form):
    return await client.post(f"{API}/posts", data=form, files={"image": IMAGE}, headers=headers)


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_create_post_with_defaults(client, catalog, user, auth_headers, upload_dir):
    response = await create_post(client, auth_headers(user.id), caption="Levi's 501", tags="vintage, denim")

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == user.id
    assert data["tags"] == ["vintage", "denim"]
    assert data["eco_points"] == 50
    assert data["image_url"].startswith("/uploads/")
    saved = list(upload_dir.iterdir())
    assert len(saved) == 1
    assert saved[0].read_bytes() == IMAGE[1]

    response = await client.get(f"{API}/users/{user.id}/sustainability")
    assert response.status_code == 200
    summary = response.json()
    assert summary["eco_points"] == 50
    assert Decimal(summary["water_saved"]) == Decimal("2.5")
    assert Decimal(summary["carbon_reduced"]) == Decimal("1.2")
    assert summary["items_reused"] == 1
    assert summary["posts_count"] == 1
    assert summary["badges"] == []


@pytest.mark.asyncio
async def test_create_post_with_explicit_contribution(client, catalog, user, auth_headers):
    response = await create_post(
        client, auth_headers(user.id),
        eco_points="1000", water_saved="3", carbon_reduced="", available_for_rent="true", rent_price="12.5"
    )

    assert response.status_code == 201
    data = response.json()
    assert data["available_for_rent"] is True
    assert Decimal(data["carbon_reduced"]) == Decimal("1.2")

    response = await client.get(f"{API}/badges/user/{user.id}")
    assert [b["name"] for b in response.json()] == ["Green Icon"]


@pytest.mark.asyncio
async def test_invalid_contribution_changes_nothing(client, db, catalog, user, auth_headers, upload_dir):
    user_id = user.id

    response = await create_post(client, auth_headers(user_id), eco_points="-5")

    assert response.status_code == 422
    response = await client.get(f"{API}/posts/user/{user_id}")
    assert response.json() == []
    stored = await db.get(User, user_id, populate_existing=True)
    assert stored.eco_points == 0
    assert stored.items_reused == 0
    assert not upload_dir.exists() or not any(upload_dir.iterdir())


@pytest.mark.asyncio
async def test_non_numeric_contribution_rejected(client, catalog, user, auth_headers):
    response = await create_post(client, auth_headers(user.id), water_saved="lots")

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_non_image_upload_rejected(client, user, auth_headers):
    response = await client.post(
        f"{API}/posts",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=auth_headers(user.id),
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_post_requires_image(client, user, auth_headers):
    response = await client.post(f"{API}/posts", data={"caption": "no photo"}, headers=auth_headers(user.id))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_post_requires_auth(client):
    response = await client.post(f"{API}/posts", files={"image": IMAGE})

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_invalid_token_rejected(client):
    response = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_for_unknown_user_rejected(client):
    token = create_access_token({"sub": "nobody"})

    response = await client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me(client, catalog, user, auth_headers):
    await create_post(client, auth_headers(user.id))

    response = await client.get(f"{API}/auth/me", headers=auth_headers(user.id))

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == user.id
    assert data["posts_count"] == 1
    assert data["eco_points"] == 50


@pytest.mark.asyncio
async def test_feed_and_post_detail(client, catalog, user, other_user, auth_headers):
    created = (await create_post(client, auth_headers(user.id), caption="Wool coat")).json()

    feed = await client.get(f"{API}/posts")
    assert feed.status_code == 200
    assert [p["id"] for p in feed.json()] == [created["id"]]
    assert feed.json()[0]["user"]["username"] == "thrifter"

    like = await client.post(f"{API}/posts/{created['id']}/like", headers=auth_headers(other_user.id))
    assert like.json() == {"is_liked": True, "likes_count": 1}

    detail = await client.get(f"{API}/posts/{created['id']}", headers=auth_headers(other_user.id))
    assert detail.status_code == 200
    assert detail.json()["is_liked"] is True
    assert detail.json()["likes_count"] == 1

    anonymous = await client.get(f"{API}/posts/{created['id']}")
    assert anonymous.json()["is_liked"] is False


@pytest.mark.asyncio
async def test_comments_endpoints(client, catalog, user, other_user, auth_headers):
    created = (await create_post(client, auth_headers(user.id))).json()

    response = await client.post(
        f"{API}/posts/{created['id']}/comments",
        json={"content": "Great find!"},
        headers=auth_headers(other_user.id),
    )
    assert response.status_code == 201

    response = await client.get(f"{API}/posts/{created['id']}/comments")
    assert [c["content"] for c in response.json()] == ["Great find!"]


@pytest.mark.asyncio
async def test_missing_resources(client, user, auth_headers):
    missing = "00000000-0000-0000-0000-000000000000"

    assert (await client.get(f"{API}/posts/{missing}")).status_code == 404
    assert (await client.post(f"{API}/posts/{missing}/like", headers=auth_headers(user.id))).status_code == 404
    assert (await client.get(f"{API}/users/nobody/sustainability")).status_code == 404
    assert (await client.get(f"{API}/users/nobody")).status_code == 404


@pytest.mark.asyncio
async def test_badge_catalog(client, catalog):
    response = await client.get(f"{API}/badges")

    assert response.status_code == 200
    assert [b["name"] for b in response.json()][:2] == ["Eco Star", "Green Icon"]
    assert len(response.json()) == 6


@pytest.mark.asyncio
async def test_rental_flow(client, catalog, user, other_user, auth_headers):
    created = (await create_post(client, auth_headers(user.id), available_for_rent="true", rent_price="10")).json()

    rentals = await client.get(f"{API}/rentals")
    assert [p["id"] for p in rentals.json()] == [created["id"]]

    response = await client.post(
        f"{API}/rentals/request",
        json={
            "post_id": created["id"],
            "start_date": "2026-06-01T10:00:00Z",
            "end_date": "2026-06-03T10:00:00Z",
            "total_price": "20",
        },
        headers=auth_headers(other_user.id),
    )
    assert response.status_code == 201
    rental = response.json()
    assert rental["owner_id"] == user.id
    assert rental["status"] == "pending"

    mine = await client.get(f"{API}/rentals/my-requests", headers=auth_headers(other_user.id))
    assert [r["id"] for r in mine.json()] == [rental["id"]]

    forbidden = await client.patch(
        f"{API}/rentals/{rental['id']}/status",
        json={"status": "approved"},
        headers=auth_headers(other_user.id),
    )
    assert forbidden.status_code == 403

    approved = await client.patch(
        f"{API}/rentals/{rental['id']}/status",
        json={"status": "approved"},
        headers=auth_headers(user.id),
    )
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"


@pytest.mark.asyncio
async def test_cannot_request_own_item(client, catalog, user, auth_headers):
    created = (await create_post(client, auth_headers(user.id), available_for_rent="true")).json()

    response = await client.post(
        f"{API}/rentals/request",
        json={
            "post_id": created["id"],
            "start_date": "2026-06-01T10:00:00Z",
            "end_date": "2026-06-02T10:00:00Z",
        },
        headers=auth_headers(user.id),
    )

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("service, method", [
    (LedgerService, "apply_contribution"),
    (BadgeService, "evaluate_badges"),
])
async def test_failure_after_post_keeps_post(client, catalog, user, auth_headers, monkeypatch, service, method):
    """Сбой леджера или бейджей даёт 500, но сохранённый пост остаётся"""
    async def failing(*args, **kwargs):
        raise OperationalError("UPDATE users", {}, Exception("database is locked"))

    monkeypatch.setattr(service, method, staticmethod(failing))

    response = await create_post(client, auth_headers(user.id), caption="Silk scarf")

    assert response.status_code == 500
    posts = await client.get(f"{API}/posts/user/{user.id}")
    assert [p["caption"] for p in posts.json()] == ["Silk scarf"]
