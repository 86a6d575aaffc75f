import logging

import pytest

from services.customer_service import create_user, user_from_input


def test_create_user_starts_empty() -> None:
    user = create_user("Matt", 39)

    assert user.name == "Matt"
    assert user.age == 39
    assert user.cart == []
    assert user.id


def test_create_user_does_not_validate_age() -> None:
    assert create_user("Nobody", -1).age == -1


def test_user_from_input_parses_age() -> None:
    user = user_from_input(" Matt ", " 39 ")

    assert user is not None
    assert user.name == "Matt"
    assert user.age == 39


@pytest.mark.parametrize(
    "name_input, age_input",
    [
        (None, "39"),
        ("", "39"),
        ("   ", "39"),
        ("Matt", None),
        ("Matt", ""),
        ("Matt", "thirty"),
        ("Matt", "39.5"),
    ],
)
def test_user_from_input_rejects_bad_input(name_input, age_input, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="cartshop.customer")

    assert user_from_input(name_input, age_input) is None
    assert any("User not created" in r.getMessage() for r in caplog.records)
