"""Short public identifiers for externally visible records."""

import secrets

NANO_ID_ALPHABET = "0123456789abcdefghjkmnpqrstuvwxyz"
NANO_ID_LENGTH = 16


def nano_id(size: int = NANO_ID_LENGTH) -> str:
    """Generate a random public identifier.

    The alphabet drops ``i``, ``l`` and ``o`` so ids survive being read aloud
    or copied by hand.
    """
    return "".join(secrets.choice(NANO_ID_ALPHABET) for _ in range(size))
