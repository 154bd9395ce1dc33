import jwt

from .conftest import TEST_SECRET


def test_register_and_login(client):
    register = client.post("/register", json={"username": "bob", "password": "testing12345"})
    assert register.status_code == 201
    assert register.json() == {"msg": "User created"}

    login = client.post("/login", json={"username": "bob", "password": "testing12345"})
    assert login.status_code == 200
    body = login.json()
    assert body["token_type"] == "bearer"
    claims = jwt.decode(body["access_token"], TEST_SECRET, algorithms=["HS256"])
    assert claims["sub"] == "bob"


def test_register_duplicate_username(client):
    data = {"username": "bob", "password": "testing12345"}
    assert client.post("/register", json=data).status_code == 201

    again = client.post("/register", json={"username": "bob", "password": "different"})
    assert again.status_code == 400
    assert again.json() == {"error": "Username taken"}

    # Original password still works
    assert client.post("/login", json=data).status_code == 200


def test_register_missing_fields(client):
    response = client.post("/register", json={"username": "bob"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid registration data"}


def test_register_blank_username(client):
    response = client.post("/register", json={"username": "  ", "password": "pw"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid registration data"}


def test_login_invalid_password(client):
    client.post("/register", json={"username": "alice", "password": "goodpassword"})
    bad_login = client.post("/login", json={"username": "alice", "password": "wrongpassword"})
    assert bad_login.status_code == 401
    assert bad_login.json() == {"error": "Bad credentials"}


def test_login_unknown_user_matches_wrong_password(client):
    client.post("/register", json={"username": "alice", "password": "goodpassword"})
    unknown = client.post("/login", json={"username": "nobody", "password": "goodpassword"})
    wrong = client.post("/login", json={"username": "alice", "password": "wrongpassword"})
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json()


def test_login_missing_fields(client):
    response = client.post("/login", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request data"}


def test_register_oversized_password(client):
    response = client.post("/register", json={"username": "bob", "password": "x" * 5000})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid registration data"}
    assert client.post("/login", json={"username": "bob", "password": "x"}).status_code == 401


def test_register_username_is_trimmed(client):
    assert client.post("/register", json={"username": "alice", "password": "pw"}).status_code == 201

    padded = client.post("/register", json={"username": " alice ", "password": "other"})
    assert padded.status_code == 400
    assert padded.json() == {"error": "Username taken"}

    login = client.post("/login", json={"username": "  alice", "password": "pw"})
    assert login.status_code == 200
    claims = jwt.decode(login.json()["access_token"], TEST_SECRET, algorithms=["HS256"])
    assert claims["sub"] == "alice"
