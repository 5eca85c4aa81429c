"""Tests for the Email, Password and Phone value types."""
from __future__ import annotations

import pydantic
import pytest

from plank.core.exceptions import ValidationError
from plank.validators import Email, Password, Phone, collect_errors


# ── Email ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["user@example.com", "first.last@mail-server.co.uk", "abc@abc.info"])
def test_valid_emails(value):
    assert Email(value).ok()
    Email(value).validate()


@pytest.mark.parametrize("value", ["example.com", "a@b.com", "user@example", "user@example.c", ".user@example.com", "user@example.com\n", ""])
def test_invalid_emails(value):
    assert not Email(value).ok()
    with pytest.raises(ValidationError, match="not valid email") as info:
        Email(value).validate()
    assert info.value.field == "email"
    assert info.value.code == "INVALID_EMAIL"


def test_email_long_invalid_input_fails_fast():
    assert not Email("a" * 5000 + "@" + "b" * 5000).ok()


# ── Phone ─────────────────────────────────────────────────────────────────────

def test_valid_phone():
    assert Phone("0123456789").ok()
    Phone("0123456789").validate()


@pytest.mark.parametrize("value", ["abc123", "", "+380501234567", "012 345", "0123\n"])
def test_invalid_phone(value):
    assert not Phone(value).ok()
    with pytest.raises(ValidationError, match="not valid phone number"):
        Phone(value).validate()


def test_phone_rejects_non_ascii_digits():
    assert not Phone("١٢٣").ok()


# ── Password ──────────────────────────────────────────────────────────────────

def test_strong_password():
    assert Password("5uperP@ssw0rd").ok()
    Password("5uperP@ssw0rd").validate()


def test_weak_password_reports_every_missing_class():
    with pytest.raises(ValidationError) as info:
        Password("password").validate()
    assert info.value.errors == [
        "password should contain one or more uppercase character",
        "password should contain one or more special character",
        "password should contain one or more digit character",
    ]
    assert "uppercase" in str(info.value)
    assert info.value.code == "WEAK_PASSWORD"
    assert not Password("password").ok()


@pytest.mark.parametrize("value,missing", [
    ("PASSWORD1!", "lowercase"),
    ("password1!", "uppercase"),
    ("Password1", "special"),
    ("Password!", "digit"),
])
def test_single_missing_class(value, missing):
    with pytest.raises(ValidationError) as info:
        Password(value).validate()
    assert len(info.value.errors) == 1
    assert missing in info.value.errors[0]
    assert not Password(value).ok()


def test_empty_password_fails_all_rules():
    with pytest.raises(ValidationError) as info:
        Password("").validate()
    assert len(info.value.errors) == 4


def test_password_repr_is_masked():
    assert "5uperP" not in repr(Password("5uperP@ssw0rd"))


# ── Helpers / pydantic ────────────────────────────────────────────────────────

def test_collect_errors_gathers_all_failures():
    errors = collect_errors(Email("example.com"), Phone("0123456789"), Password("password"))
    assert errors.has_errors()
    assert [e.field for e in errors.get_errors()] == ["email", "password"]


def test_collect_errors_empty_when_all_valid():
    errors = collect_errors(Email("user@example.com"), Phone("0123456789"))
    assert not errors.has_errors()


def test_validation_error_to_dict():
    err = ValidationError("phone", "not valid phone number")
    assert err.to_dict() == {
        "field": "phone",
        "code": "INVALID_PHONE",
        "message": "not valid phone number",
        "errors": ["not valid phone number"],
    }


class SignUp(pydantic.BaseModel):
    email: Email
    password: Password
    phone: Phone


def test_value_types_as_pydantic_fields():
    form = SignUp(email="user@example.com", password="5uperP@ssw0rd", phone="0123456789")
    assert isinstance(form.email, Email)
    assert isinstance(form.password, Password)


def test_pydantic_field_rejects_invalid_value():
    with pytest.raises(pydantic.ValidationError) as info:
        SignUp(email="example.com", password="password", phone="abc123")
    fields = {err["loc"][0] for err in info.value.errors()}
    assert fields == {"email", "password", "phone"}


def test_validated_str_is_abstract():
    from plank.validators.base import ValidatedStr

    assert ValidatedStr.__abstractmethods__ == frozenset({"validate"})
    assert Email.__abstractmethods__ == frozenset()
