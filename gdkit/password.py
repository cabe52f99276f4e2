"""Password hashing with bcrypt."""

import bcrypt

DEFAULT_COST = 10


def hash_password(password):
    """Return a bcrypt hash of ``password``; each call uses a new salt."""
    if password == "":
        raise ValueError("password must not empty")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=DEFAULT_COST)).decode(
        "ascii"
    )


def is_match(password, hashed):
    """Return True if ``password`` matches the bcrypt ``hashed`` value."""
    if password == "" or hashed == "":
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False