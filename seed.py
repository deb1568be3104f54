# seed.py — inserts the sample book at startup
import asyncio
import logging
import sys
from decimal import Decimal

from config import Settings, get_settings
from crud.book import BookStore
from database import init_db, make_engine, make_session_factory
from errors import BookshelfError
from logging_config import setup_logging
from schemas import Book

logger = logging.getLogger(__name__)

SAMPLE_BOOK = {
    "title": "The Great Gatsby",
    "author": "F. Scott Fitzgerald",
    "price": Decimal("10.99"),
}


async def seed_books(store: BookStore) -> Book:
    """Save one copy of the sample book.

    Not idempotent: every call inserts a new row with a new id.
    """
    book = await store.save(Book(**SAMPLE_BOOK))
    logger.info("Seeded %r as book %s", book.title, book.id, extra={"book_id": book.id})
    return book


async def run(settings: Settings = None) -> Book:
    settings = settings or get_settings()
    engine = make_engine(settings.database_url)
    try:
        await init_db(engine)
        return await seed_books(BookStore(make_session_factory(engine)))
    finally:
        await engine.dispose()


def main():
    settings = get_settings()
    setup_logging(settings.log_level, settings.json_logs)
    try:
        asyncio.run(run(settings))
    except BookshelfError:
        logger.exception("Seeding failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
