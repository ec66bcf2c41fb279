"""
In-memory article store with whole-collection persistence.

The store owns the authoritative article collection. Every mutation builds
the next collection, writes it in full through the storage backend, and only
then replaces the in-memory collection, so memory and storage never diverge.
"""
import copy
import logging
import threading
from typing import Any, Dict, List, Optional

from src.article_extractor import ArticleExtractor
from src.errors import NotFoundError, ValidationError
from src.file_utils import dump_json
from src.tag_generator import generate_tags

logger = logging.getLogger(__name__)


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class ArticleStore:
    """Authoritative article collection backed by an ArticleExtractor."""

    def __init__(self, extractor: ArticleExtractor):
        """
        Initialize an empty store.

        Args:
            extractor: Storage backend used to load and persist the collection
        """
        self.extractor = extractor
        self._articles: List[Dict[str, Any]] = []
        self._lock = threading.RLock()

    def load_all(self) -> int:
        """
        Replace the in-memory collection with the stored one.

        Returns:
            Number of articles loaded

        Raises:
            PersistenceError: If the stored data can't be read or parsed
        """
        articles = self.extractor.load_articles()
        with self._lock:
            self._articles = articles
        logger.info("Articles loaded from %s (%d)", self.extractor.describe(), len(articles))
        return len(articles)

    def list(self) -> List[Dict[str, Any]]:
        """Return a copy of every article in insertion order."""
        with self._lock:
            return copy.deepcopy(self._articles)

    def create(self, title: Any, content: Any) -> Dict[str, Any]:
        """
        Create an article and persist the collection.

        Args:
            title: Article title, non-empty string
            content: Article content, non-empty string

        Returns:
            The new article

        Raises:
            ValidationError: If title or content is missing or empty
        """
        if not _is_filled(title) or not _is_filled(content):
            raise ValidationError("Title and content are required.")

        with self._lock:
            article = {
                "id": self._next_id(),
                "title": title,
                "content": content,
                "tags": generate_tags(content),
            }
            self._commit(self._articles + [article])
            logger.info("Created article %d", article["id"])
            return copy.deepcopy(article)

    def update(self, article_id: int, title: Optional[Any] = None,
               content: Optional[Any] = None) -> Dict[str, Any]:
        """
        Update an article in place and persist the collection.

        Empty or missing fields are left unchanged. A new content recomputes
        the tags.

        Raises:
            NotFoundError: If no article has this id
            ValidationError: If a provided field is not a string
        """
        for name, value in (("Title", title), ("Content", content)):
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"{name} must be a string.")

        with self._lock:
            index = self._index_of(article_id)
            article = dict(self._articles[index])
            if _is_filled(title):
                article["title"] = title
            if _is_filled(content):
                article["content"] = content
                article["tags"] = generate_tags(content)

            articles = list(self._articles)
            articles[index] = article
            self._commit(articles)
            logger.info("Updated article %d", article_id)
            return copy.deepcopy(article)

    def delete(self, article_id: int) -> Dict[str, str]:
        """
        Delete an article and persist the collection.

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If no article has this id
        """
        with self._lock:
            self._index_of(article_id)
            self._commit([a for a in self._articles if a.get("id") != article_id])
            logger.info("Deleted article %d", article_id)
            return {"message": f"Article with ID {article_id} deleted."}

    def persist(self) -> None:
        """Write the current collection to storage in full."""
        with self._lock:
            self._commit(self._articles)

    def export(self) -> str:
        """Return the whole collection as pretty-printed JSON text."""
        with self._lock:
            return dump_json(self._articles)

    def _commit(self, articles: List[Dict[str, Any]]) -> None:
        # Caller holds the lock. Memory changes only after a successful write.
        self.extractor.save_articles(articles)
        self._articles = articles
        logger.info("Articles saved to %s", self.extractor.describe())

    def _next_id(self) -> int:
        ids = (a.get("id") for a in self._articles)
        return max((i for i in ids if isinstance(i, int)), default=0) + 1

    def _index_of(self, article_id: int) -> int:
        for i, article in enumerate(self._articles):
            if article.get("id") == article_id:
                return i
        raise NotFoundError("Article not found.")
