"""Read-only converter registry interface consumed by the path finder."""

from abc import ABC, abstractmethod
from typing import List


class ConverterRegistry(ABC):
    """Query surface of a converter registry.

    Implementations must answer consistently for the duration of a single
    path query. Ordering of anchors and connector tokens is significant: the
    path finder explores them in the order returned here.
    """

    @abstractmethod
    def is_anchor(self, token: str) -> bool:
        """Return True if the token designates a converter anchor."""

    @abstractmethod
    def get_convertible_token_anchors(self, token: str) -> List[str]:
        """Return the anchors through which the token can be converted."""

    @abstractmethod
    def owner_of(self, anchor: str) -> str:
        """Return the converter currently owning the anchor."""

    @abstractmethod
    def connector_token_count(self, converter: str) -> int:
        """Return the number of connector tokens of a converter."""

    @abstractmethod
    def connector_token_at(self, converter: str, index: int) -> str:
        """Return the connector token at the given index."""

    def connector_tokens(self, converter: str) -> List[str]:
        """Return all connector tokens of a converter in registry order."""
        return [
            self.connector_token_at(converter, i)
            for i in range(self.connector_token_count(converter))
        ]
