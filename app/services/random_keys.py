"""Random token generation for passwords, activation and reset keys."""

import secrets
import string

KEY_ALPHABET = string.ascii_letters + string.digits
DEF_COUNT = 20


def _random_alphanumeric(length: int = DEF_COUNT) -> str:
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))


def generate_password() -> str:
    """Generate a random password for accounts created without one."""
    return _random_alphanumeric()


def generate_activation_key() -> str:
    """Generate the key sent to a newly registered user to activate the account."""
    return _random_alphanumeric()


def generate_reset_key() -> str:
    """Generate a password reset key."""
    return _random_alphanumeric()
