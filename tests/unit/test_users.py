"""
============================================================================
Unit Tests - Users
============================================================================
"""

import pytest

from orderbook.errors import ConstraintViolation
from orderbook.schemas.users import UserCreate, UserUpdate


def make_user(user_name: str = "jdoe", email: str = "jdoe@example.com") -> UserCreate:
    return UserCreate(
        first_name="John",
        last_name="Doe",
        user_name=user_name,
        email=email,
        password="secret-pass",
    )


def test_create_and_show(users):
    created = users.create(make_user())
    assert created.user_name == "jdoe"
    assert not hasattr(created, "password")
    assert users.show(created.id) == created


def test_show_all_sorted_by_user_name(users):
    users.create(make_user("zed", "zed@example.com"))
    users.create(make_user("amy", "amy@example.com"))
    # "demo" comes from the seed data
    assert [u.user_name for u in users.show_all()] == ["amy", "demo", "zed"]


def test_duplicate_user_name(users):
    users.create(make_user())
    with pytest.raises(ConstraintViolation):
        users.create(make_user(email="other@example.com"))


def test_update(users):
    created = users.create(make_user())
    body = UserUpdate(
        first_name="Jane",
        last_name="Doe",
        user_name="jane",
        email="jane@example.com",
        password="new-secret",
    )
    updated = users.update(created.id, body)
    assert (updated.first_name, updated.user_name, updated.email) == ("Jane", "jane", "jane@example.com")
    assert users.show(created.id) == updated


def test_update_missing_is_none(users):
    assert users.update("no-such-user", UserUpdate(**make_user().model_dump())) is None


def test_delete(users):
    created = users.create(make_user())
    assert users.delete(created.id) == created
    assert users.show(created.id) is None
    assert users.delete(created.id) is None


def test_delete_user_with_orders_is_constraint_violation(users, user_id):
    with pytest.raises(ConstraintViolation):
        users.delete(user_id)
