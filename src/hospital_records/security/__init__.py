"""Password hashing for user accounts."""

from hospital_records.security.passwords import hash_password, verify_password

__all__ = ["hash_password", "verify_password"]
