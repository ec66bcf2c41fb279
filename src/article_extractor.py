"""
Abstract interface for article storage backends.

Defines the interface for loading and saving the full article collection.
Implementations can store the collection locally or in distributed storage
(Tigris/S3) without changing how the article store uses them.
"""
from abc import ABC, abstractmethod
from typing import Dict, List


class ArticleExtractor(ABC):
    """Abstract base class for article storage backends."""

    @abstractmethod
    def load_articles(self) -> List[Dict]:
        """
        Load the whole article collection.

        Returns:
            List of article dicts with id, title, content, and tags keys.
            Empty list if nothing has been stored yet.

        Raises:
            PersistenceError: If the storage can't be read or holds invalid data.
        """

    @abstractmethod
    def save_articles(self, articles: List[Dict]) -> None:
        """
        Overwrite the stored collection with ``articles``.

        Args:
            articles: The complete article collection.

        Raises:
            PersistenceError: If the storage can't be written.
        """

    @abstractmethod
    def describe(self) -> str:
        """Return a short human readable location of the storage, for logs."""
