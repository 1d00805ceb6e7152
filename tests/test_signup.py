from credvault.models.user import User
from tests.conftest import STRONG_PASSWORD


def _messages(resp, path=None):
    return [e["msg"] for e in resp.json()["errors"] if path is None or e["path"] == path]


def test_signup_creates_user(signup, session):
    resp = signup()

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User created successfully"
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "a@x.com"
    assert isinstance(body["user"]["id"], int)

    stored = session.query(User).filter(User.email == "a@x.com").one()
    assert stored.username == "alice"


def test_signup_response_never_contains_password_or_hash(signup, session):
    resp = signup()

    text = resp.text
    stored = session.query(User).filter(User.email == "a@x.com").one()
    assert STRONG_PASSWORD not in text
    assert stored.password_hash not in text
    assert set(resp.json()["user"]) == {"id", "username", "email"}


def test_duplicate_email_rejected_regardless_of_other_fields(signup, session):
    assert signup().status_code == 201

    resp = signup(username="someone-else", password="An0ther#Secret")

    assert resp.status_code == 400
    assert resp.json() == {"message": "Email already registered"}
    assert session.query(User).count() == 1


def test_empty_body_reports_every_rule(client):
    resp = client.post("/signup", json={})

    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert {e["path"] for e in errors} == {"username", "email", "password"}
    assert _messages(resp, "username") == ["Username cannot be empty"]
    assert _messages(resp, "email") == ["Enter a valid email address"]
    assert _messages(resp, "password") == [
        "Password must be at least 8 characters",
        "Please enter a strong password",
    ]
    assert all(e["location"] == "body" for e in errors)


def test_whitespace_username_is_empty(signup):
    resp = signup(username="   ")

    assert resp.status_code == 400
    assert _messages(resp) == ["Username cannot be empty"]


def test_invalid_email_rejected(signup):
    resp = signup(email="not-an-email")

    assert resp.status_code == 400
    assert _messages(resp) == ["Enter a valid email address"]


def test_long_but_weak_password_only_fails_strength(signup):
    resp = signup(password="password123")

    assert resp.status_code == 400
    assert _messages(resp) == ["Please enter a strong password"]


def test_short_password_fails_length_and_strength(signup):
    resp = signup(password="Ab1!")

    assert resp.status_code == 400
    assert _messages(resp) == [
        "Password must be at least 8 characters",
        "Please enter a strong password",
    ]


def test_validation_runs_before_duplicate_check(signup):
    assert signup().status_code == 201

    resp = signup(password="weak")

    assert resp.status_code == 400
    assert "errors" in resp.json()


def test_malformed_json_is_a_validation_error(client):
    resp = client.post("/signup", content=b"{not json", headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json()["errors"]


def test_wrong_field_type_is_a_validation_error(client):
    resp = client.post("/signup", json={"username": ["alice"], "email": "a@x.com", "password": STRONG_PASSWORD})

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["path"] == "username"


def test_surrounding_whitespace_is_stripped(signup, session):
    resp = signup(username="  alice ", email=" a@x.com ")

    assert resp.status_code == 201
    assert resp.json()["user"] == {"id": resp.json()["user"]["id"], "username": "alice", "email": "a@x.com"}


def test_nul_in_password_is_a_validation_error(signup, session):
    resp = signup(password="Str0ng!Pass\x00")

    assert resp.status_code == 400
    assert resp.json() == {
        "errors": [
            {"type": "field", "path": "password", "msg": "Password cannot contain NUL characters", "location": "body"}
        ]
    }
    assert session.query(User).count() == 0


def test_password_longer_than_bcrypt_reads_is_rejected(signup):
    # 42 characters, 73 bytes once encoded
    resp = signup(password="Str0ng!Pass" + "é" * 31)

    assert resp.status_code == 400
    assert _messages(resp) == ["Password cannot be longer than 72 bytes"]


def test_password_of_exactly_72_bytes_is_accepted(signup):
    assert signup(password="Aa1!" + "a" * 68).status_code == 201
