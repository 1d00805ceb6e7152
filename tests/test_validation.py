import pytest

from credvault.core.config import Settings
from credvault.core.errors import ValidationError
from credvault.core.validation import PasswordPolicy, is_valid_email, validate_login, validate_signup


@pytest.mark.parametrize(
    "password, strong",
    [
        ("Str0ng!Pass", True),
        ("Aa1!aaaa", True),
        ("Aa1!aaa", False),      # too short
        ("str0ng!pass", False),  # no uppercase
        ("STR0NG!PASS", False),  # no lowercase
        ("Strong!Pass", False),  # no digit
        ("Str0ngPass1", False),  # no symbol
    ],
)
def test_default_policy(password, strong):
    assert PasswordPolicy().is_strong(password) is strong


def test_policy_from_settings():
    settings = Settings(_env_file=None, PASSWORD_MIN_LENGTH=12, PASSWORD_MIN_SYMBOLS=0)
    policy = PasswordPolicy.from_settings(settings)

    assert policy.min_length == 12
    assert policy.is_strong("Longpassword1")
    assert not policy.is_strong("Short1pass")


def test_length_message_follows_policy():
    with pytest.raises(ValidationError) as exc:
        validate_signup("alice", "a@x.com", "Ab1!", PasswordPolicy(min_length=10))

    assert exc.value.errors[0]["msg"] == "Password must be at least 10 characters"


def test_signup_collects_all_errors():
    with pytest.raises(ValidationError) as exc:
        validate_signup("", "bad", "", PasswordPolicy())

    assert [e["path"] for e in exc.value.errors] == ["username", "email", "password", "password"]


def test_valid_signup_passes():
    validate_signup("alice", "a@x.com", "Str0ng!Pass", PasswordPolicy())


def test_login_empty_email_reports_only_empty():
    with pytest.raises(ValidationError) as exc:
        validate_login("", "secret")

    assert exc.value.errors == [
        {"type": "field", "path": "email", "msg": "Email cannot be empty", "location": "body"}
    ]


@pytest.mark.parametrize("email", ["a@x.com", "first.last@sub.domain.org", "user+tag@mail.co"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", "plain", "a@", "@x.com", "a@@x.com", "a b@x.com"])
def test_invalid_emails(email):
    assert not is_valid_email(email)
