import bcrypt

from src.app.services.password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt implementation, cost factor 12 unless configured otherwise"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    def dummy_verify(self) -> None:
        bcrypt.checkpw(b"not_the_dummy_password", self._dummy_hash)
