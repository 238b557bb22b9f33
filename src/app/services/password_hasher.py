from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way credential hashing"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain text password"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain text password against a stored hash"""
        pass

    @abstractmethod
    def dummy_verify(self) -> None:
        """Spend the same time as verify() when there is nothing to check"""
        pass
