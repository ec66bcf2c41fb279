"""
Factory function for creating article extractors.
"""
from typing import Optional

from src.article_extractor import ArticleExtractor
from src.config import Config
from src.local_disk_article_extractor import LocalDiskArticleExtractor
from src.tigris_article_extractor import TigrisArticleExtractor


def create_article_extractor(config: Optional[Config] = None) -> ArticleExtractor:
    """
    Create an article extractor based on configuration.

    Uses the ARTICLE_STORAGE_TYPE setting to determine which implementation
    to use:
    - 'local' or unset: LocalDiskArticleExtractor (default)
    - 'tigris': TigrisArticleExtractor

    Args:
        config: Configuration to read settings from (defaults to a new Config)

    Returns:
        ArticleExtractor: Configured article extractor instance
    """
    config = config or Config()
    storage_type = config.storage_type

    if storage_type == 'tigris':
        return TigrisArticleExtractor(
            object_key=f"{config.state_dir}/{config.data_filename}"
        )
    return LocalDiskArticleExtractor(
        state_dir=config.state_dir,
        filename=config.data_filename
    )
