# services/customer_service.py
"""
customer_service.py

Helpers for creating customers.

- create_user() always succeeds and starts with an empty cart.
- user_from_input() builds a user from raw form values (name, age) and
  returns None when a value is missing or the age is not a whole number.
"""

import logging
from typing import Optional

from models.user import User

logger = logging.getLogger("cartshop.customer")


def create_user(name: str, age: int) -> User:
    # Age sign is not validated.
    user = User(name, age)
    logger.debug("Created user %s (%s)", user.id, user.name)
    return user


def user_from_input(name_input: Optional[str], age_input: Optional[str]) -> Optional[User]:
    if name_input is None or not name_input.strip():
        logger.warning("User not created: name is missing")
        return None
    if age_input is None or not str(age_input).strip():
        logger.warning("User not created: age is missing")
        return None
    try:
        age = int(str(age_input).strip())
    except (TypeError, ValueError):
        logger.warning("User not created: age %r is not a number", age_input)
        return None
    return create_user(name_input.strip(), age)
