# crud/book.py — explicit CRUD store over the books table
import logging
from collections.abc import Mapping
from typing import List, Optional, Union

import pydantic
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from errors import StorageError, ValidationError
from models import Book as BookRow
from schemas import Book, BookCreate

logger = logging.getLogger(__name__)


def _validate(book: Union[Book, BookCreate, Mapping]) -> Book:
    if isinstance(book, BookCreate):
        book = book.model_dump()
    try:
        return Book.model_validate(book)
    except pydantic.ValidationError as exc:
        messages = [
            f"{'.'.join(str(p) for p in err['loc']) or 'book'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise ValidationError(messages) from exc


class BookStore:
    """Create/read/update/delete for books.

    Every call runs in its own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def save(self, book) -> Book:
        """Insert when ``book.id`` is None, otherwise update (or insert) that id."""
        book = _validate(book)
        async with self._session_factory() as db:
            try:
                if book.id is None:
                    row = BookRow(**book.model_dump(exclude={"id"}))
                    db.add(row)
                else:
                    row = await db.merge(BookRow(**book.model_dump()))
                await db.commit()
                await db.refresh(row)
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.error("save failed for %r: %s", book.title, exc)
                raise StorageError(f"could not save book {book.title!r}") from exc
            logger.debug("saved book %s", row.id, extra={"book_id": row.id})
            return Book.model_validate(row)

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(BookRow).where(BookRow.id == book_id))
                row = result.scalar_one_or_none()
            except SQLAlchemyError as exc:
                raise StorageError(f"could not load book {book_id}") from exc
            return Book.model_validate(row) if row is not None else None

    async def find_all(self) -> List[Book]:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(BookRow).order_by(BookRow.id))
                rows = result.scalars().all()
            except SQLAlchemyError as exc:
                raise StorageError("could not list books") from exc
            return [Book.model_validate(row) for row in rows]

    async def count(self) -> int:
        async with self._session_factory() as db:
            try:
                result = await db.execute(select(func.count()).select_from(BookRow))
            except SQLAlchemyError as exc:
                raise StorageError("could not count books") from exc
            return result.scalar_one()

    async def delete(self, book_id: int) -> bool:
        """Remove a book. Returns False when no book had that id."""
        async with self._session_factory() as db:
            try:
                result = await db.execute(delete(BookRow).where(BookRow.id == book_id))
                await db.commit()
            except SQLAlchemyError as exc:
                await db.rollback()
                logger.error("delete failed for book %s: %s", book_id, exc)
                raise StorageError(f"could not delete book {book_id}") from exc
            removed = result.rowcount > 0
            if removed:
                logger.debug("deleted book %s", book_id, extra={"book_id": book_id})
            return removed
