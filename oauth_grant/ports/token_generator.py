"""Token identifier generator port"""

from abc import ABC, abstractmethod


class TokenGenerator(ABC):
    """Produces unguessable, collision-resistant token identifiers"""

    @abstractmethod
    def new_identifier(self) -> str:
        """Return a fresh identifier"""
