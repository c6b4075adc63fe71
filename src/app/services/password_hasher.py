from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hashes staff passwords before they are stored"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, hashed_password: str) -> bool:
        pass
