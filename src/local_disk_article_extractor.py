"""
Local disk implementation of article storage.

Stores the article collection as a pretty-printed JSON array on the local
filesystem. Default location: state/data.json
"""
from typing import Dict, List

from src.article_extractor import ArticleExtractor
from src.base_json_extractor import BaseLocalDiskExtractor, parse_article_collection


class LocalDiskArticleExtractor(BaseLocalDiskExtractor, ArticleExtractor):
    """
    Local disk implementation of article storage.

    The whole collection is rewritten on every save.
    """

    def __init__(self, state_dir: str = "state", filename: str = "data.json"):
        """
        Initialize the local disk article extractor.

        Args:
            state_dir: Directory for the data file (default: "state")
            filename: Name of the data file (default: "data.json")
        """
        self.filename = filename
        super().__init__(state_dir=state_dir)

    def _get_filename(self) -> str:
        """Get the filename for article storage."""
        return self.filename

    def load_articles(self) -> List[Dict]:
        """
        Load all articles from local disk.

        Returns:
            List of article dicts, empty if the file is missing or blank.
        """
        return parse_article_collection(self._load_text(), self._get_filepath())

    def save_articles(self, articles: List[Dict]) -> None:
        """
        Overwrite the data file with the given collection.

        Args:
            articles: The complete article collection.
        """
        self._save_data(articles)

    def describe(self) -> str:
        return self._get_filepath()
