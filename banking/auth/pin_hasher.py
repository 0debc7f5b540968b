"""PIN generation, hashing and verification.

PINs are hashed with bcrypt at a fixed cost factor. Each digest embeds its
own random salt, so hashing the same PIN twice produces different digests
that both verify. Verification is bcrypt's constant-time comparison and
never raises: malformed digests simply fail to verify.
"""

import secrets
import string
from functools import lru_cache

import bcrypt

PIN_LENGTH = 6
BCRYPT_ROUNDS = 12


def generate_pin(length: int = PIN_LENGTH) -> str:
    """Return a uniformly random numeric PIN drawn from the OS CSPRNG."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


def hash_pin(pin: str) -> str:
    """Hash *pin* with a fresh salt."""
    digest = bcrypt.hashpw(pin.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return digest.decode("ascii")


def verify_pin(pin: str, pin_hash: str) -> bool:
    """Return ``True`` only if *pin* matches *pin_hash*."""
    try:
        return bcrypt.checkpw(pin.encode("utf-8"), pin_hash.encode("utf-8"))
    except ValueError:
        # Invalid salt, over-long input or undecodable text
        return False


@lru_cache(maxsize=1)
def dummy_pin_hash() -> str:
    """Digest used to spend a full bcrypt check when no user matched a login."""
    return hash_pin(generate_pin())
