"""One-way password transform for user accounts.

Only the hash produced here is ever stored; plaintext passwords are not
persisted or compared anywhere else.
"""

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    """Return a salted one-way hash of ``password``."""
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Check ``password`` against a hash produced by hash_password."""
    return check_password_hash(password_hash, password)
