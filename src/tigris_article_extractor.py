"""
Tigris/S3-compatible storage implementation of article storage.

Stores the article collection as one JSON object in an S3-compatible object
storage service, so several service instances can share the same data.
Default object key: state/data.json
"""
from typing import Dict, List

from src.article_extractor import ArticleExtractor
from src.base_json_extractor import BaseTigrisExtractor, parse_article_collection


class TigrisArticleExtractor(BaseTigrisExtractor, ArticleExtractor):
    """Tigris/S3-compatible storage implementation of article storage."""

    def __init__(self, object_key: str = "state/data.json", **kwargs):
        """
        Initialize the Tigris article extractor.

        Args:
            object_key: S3 object key holding the collection.
            **kwargs: Additional keyword arguments passed to BaseTigrisExtractor.
        """
        super().__init__(**kwargs)
        self.object_key = object_key

    def _get_object_key(self) -> str:
        """Get the S3 object key for article storage."""
        return self.object_key

    def load_articles(self) -> List[Dict]:
        """
        Load all articles from S3.

        Returns:
            List of article dicts, empty if the object doesn't exist.
        """
        return parse_article_collection(self._load_text_from_s3(), self.describe())

    def save_articles(self, articles: List[Dict]) -> None:
        """
        Overwrite the S3 object with the given collection.

        Args:
            articles: The complete article collection.
        """
        self._save_to_s3(articles)

    def describe(self) -> str:
        return f"s3://{self.bucket_name}/{self.object_key}"
