import jwt

from ..test_utils.api import API, auth_header, register


async def test_register_returns_user_and_token(client):
    response = await client.post(
        f"{API}/auth/register",
        json={"email": "Alice@Example.com", "password": "pw", "role": "student"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "SUCCESS"
    assert body["data"]["user"]["email"] == "alice@example.com"
    assert body["data"]["user"]["role"] == "student"

    claims = jwt.decode(body["data"]["token"], "test-secret-0123456789abcdef0123456789abcdef", algorithms=["HS256"])
    assert claims["sub"] == str(body["data"]["user"]["id"])
    assert claims["role"] == "student"


async def test_duplicate_registration_conflicts(client):
    await register(client, "bob@example.com", "student")

    response = await client.post(
        f"{API}/auth/register",
        json={"email": "BOB@example.com", "password": "x", "role": "instructor"},
    )

    assert response.status_code == 409
    assert response.json()["message"] == "User already exists"


async def test_register_rejects_unknown_role(client):
    response = await client.post(
        f"{API}/auth/register",
        json={"email": "c@example.com", "password": "x", "role": "admin"},
    )

    assert response.status_code == 400
    assert response.json()["status"] == "ERROR"


async def test_login_and_me(client):
    await register(client, "dana@example.com", "instructor")

    login = await client.post(
        f"{API}/auth/login", json={"email": "DANA@example.com", "password": "secret"}
    )
    assert login.status_code == 200
    token = login.json()["data"]["token"]

    me = await client.get(f"{API}/auth/me", headers=auth_header(token))
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "dana@example.com"
    assert me.json()["data"]["role"] == "instructor"


async def test_login_with_wrong_password(client):
    await register(client, "erin@example.com", "student")

    response = await client.post(
        f"{API}/auth/login", json={"email": "erin@example.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_me_requires_a_token(client):
    response = await client.get(f"{API}/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "Missing token"


async def test_me_rejects_a_forged_token(client):
    forged = jwt.encode({"sub": "1", "email": "x@example.com", "role": "instructor"}, "other-secret-0123456789abcdef0123456789abcdef")

    response = await client.get(f"{API}/auth/me", headers=auth_header(forged))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
