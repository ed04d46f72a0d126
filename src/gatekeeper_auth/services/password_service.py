"""bcrypt implementation of the PasswordHasher port.

Hashes carry their own salt and cost factor, so a stored value is all that
is needed to check a login later.
"""

import re

import bcrypt

from gatekeeper_auth.ports import PasswordHasher

# bcrypt ignores everything past the first 72 bytes of a secret, and
# recent releases reject longer input outright.
BCRYPT_MAX_BYTES = 72

# $2b$10$<22-char salt><31-char digest>
_BCRYPT_COST = re.compile(r"^\$2[abxy]?\$(\d{2})\$")


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHashingService(PasswordHasher):
    """Salted bcrypt hashing with a fixed work factor.

    The work factor comes from configuration and is never chosen by the
    caller of ``hash``. Strength rules belong to the request boundary.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("Str0ng!Pass")
    >>> hasher.verify("Str0ng!Pass", stored)
    True
    >>> hasher.verify("str0ng!pass", stored)
    False
    """

    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Parameters
        ----------
        rounds
            log2 of the bcrypt iteration count. Each step doubles the cost
            of both hashing and verification.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Compare a candidate password with a stored bcrypt hash.

        An empty or unparseable hash counts as a mismatch.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Tell whether a stored hash was made with a different work factor.

        Unrecognized hashes always need a rehash.
        """
        match = _BCRYPT_COST.match(password_hash or "")
        if match is None:
            return True
        return int(match.group(1)) != self._rounds
