from auth import security
from categories import repository as category_repository
from conftest import auth_headers

MISSING_ID = "66758fbdf0695012c197a1b6"


def create_category(client, token, title="Category A"):
    return client.post("/api/categories", json={"title": title}, headers=auth_headers(token))


def test_list_categories_is_sorted_by_title(client, john_token):
    for title in ("Category C", "Category A", "Category B"):
        create_category(client, john_token, title)

    res = client.get("/api/categories")

    assert res.status_code == 200
    assert [c["title"] for c in res.json()["categories"]] == ["Category A", "Category B", "Category C"]


def test_list_categories_store_failure_returns_500(client, monkeypatch):
    async def broken(db):
        raise RuntimeError("Server error")

    monkeypatch.setattr(category_repository, "list_categories", broken)

    res = client.get("/api/categories")

    assert res.status_code == 500
    assert res.json() == {"msg": "An error occurred", "error": "Server error"}


def test_get_category_by_id(client, john_token):
    created = create_category(client, john_token, "Category D").json()["category"]

    res = client.get(f"/api/categories/{created['_id']}")

    assert res.status_code == 200
    assert res.json()["category"] == created


def test_get_missing_category_returns_404(client):
    res = client.get(f"/api/categories/{MISSING_ID}")

    assert res.status_code == 404
    assert res.json() == {"msg": "Category not found"}


def test_get_category_with_malformed_id_returns_400(client):
    res = client.get("/api/categories/1")

    assert res.status_code == 400
    assert res.json() == {"msg": "Invalid ID format"}


def test_create_category_owned_by_token_user(client, john_token):
    res = create_category(client, john_token)

    assert res.status_code == 201
    body = res.json()
    assert body["msg"] == "Category registered successfully"
    assert body["category"]["title"] == "Category A"
    assert body["category"]["user"] == security.decode_access_token(john_token)["sub"]


def test_create_category_without_token_returns_401(client):
    res = client.post("/api/categories", json={"title": "Category A"})

    assert res.status_code == 401
    assert res.json() == {"msg": "Access denied. No token provided."}


def test_create_category_with_invalid_token_returns_401(client):
    res = client.post("/api/categories", json={"title": "Category A"}, headers=auth_headers("not-a-token"))

    assert res.status_code == 401
    assert res.json() == {"msg": "Invalid token"}


def test_create_category_with_expired_token_returns_401(client, john_token, monkeypatch):
    monkeypatch.setenv("TOKEN_EXPIRE_SECONDS", "-10")
    expired = security.build_access_token(user_id=security.decode_access_token(john_token)["sub"])

    res = create_category(client, expired)

    assert res.status_code == 401


def test_create_category_validation_runs_before_auth(client):
    res = client.post("/api/categories", json={"title": ""})

    assert res.status_code == 400
    assert res.json()["msg"].startswith("title:")


def test_create_category_rejects_long_title(client, john_token):
    res = create_category(client, john_token, "x" * 101)

    assert res.status_code == 400


def test_update_category_by_owner(client, john_token):
    created = create_category(client, john_token).json()["category"]

    res = client.put(
        f"/api/categories/{created['_id']}",
        json={"title": "Category B"},
        headers=auth_headers(john_token),
    )

    assert res.status_code == 200
    body = res.json()
    assert body["msg"] == "Category updated successfully"
    assert body["category"] == {**created, "title": "Category B"}
    assert client.get(f"/api/categories/{created['_id']}").json()["category"]["title"] == "Category B"


def test_update_category_by_other_user_returns_403(client, john_token, james_token):
    created = create_category(client, john_token).json()["category"]

    res = client.put(
        f"/api/categories/{created['_id']}",
        json={"title": "Category B"},
        headers=auth_headers(james_token),
    )

    assert res.status_code == 403
    assert res.json() == {"msg": "You're not authorized to perform this action"}
    assert client.get(f"/api/categories/{created['_id']}").json()["category"]["title"] == "Category A"


def test_update_missing_category_returns_404(client, john_token):
    res = client.put(f"/api/categories/{MISSING_ID}", json={"title": "Category B"}, headers=auth_headers(john_token))

    assert res.status_code == 404


def test_update_category_with_invalid_payload_returns_400(client, john_token):
    created = create_category(client, john_token).json()["category"]

    res = client.put(f"/api/categories/{created['_id']}", json={"title": "AB"}, headers=auth_headers(john_token))

    assert res.status_code == 400


def test_delete_category_returns_prior_state(client, john_token):
    created = create_category(client, john_token).json()["category"]

    res = client.delete(f"/api/categories/{created['_id']}", headers=auth_headers(john_token))

    assert res.status_code == 200
    assert res.json() == {"msg": "Category deleted successfully", "category": created}
    assert client.get(f"/api/categories/{created['_id']}").status_code == 404


def test_delete_category_by_other_user_returns_403(client, john_token, james_token):
    created = create_category(client, john_token).json()["category"]

    res = client.delete(f"/api/categories/{created['_id']}", headers=auth_headers(james_token))

    assert res.status_code == 403
    assert client.get(f"/api/categories/{created['_id']}").status_code == 200


def test_delete_missing_category_returns_404(client, john_token):
    res = client.delete(f"/api/categories/{MISSING_ID}", headers=auth_headers(john_token))

    assert res.status_code == 404


def test_delete_category_requires_token(client, john_token):
    created = create_category(client, john_token).json()["category"]

    res = client.delete(f"/api/categories/{created['_id']}")

    assert res.status_code == 401
