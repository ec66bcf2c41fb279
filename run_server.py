#!/usr/bin/env python
"""
Run the article service HTTP server.
"""
import logging

import uvicorn

from src.article_api import create_app
from src.article_extractor_factory import create_article_extractor
from src.article_store import ArticleStore
from src.config import Config
from src.errors import PersistenceError

logger = logging.getLogger('articles_api')


def build_store(config: Config) -> ArticleStore:
    """Create the article store and load the persisted collection."""
    store = ArticleStore(create_article_extractor(config))
    try:
        store.load_all()
    except PersistenceError as exc:
        # Start empty; the stored data stays untouched until the next write.
        logger.error(f"Could not load articles: {exc.message} {exc.detail or ''}".rstrip())
    return store


def main():
    """Run the article server."""
    config = Config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    app = create_app(build_store(config))

    logger.info(f"Server running on port {config.port}")
    logger.info(f"Open http://localhost:{config.port}/articles in your browser (or use curl)")

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level
    )


if __name__ == "__main__":
    main()
