# main.py — HTTP host: creates tables, seeds once, serves the book store
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from crud.book import BookStore
from database import init_db, make_engine, make_session_factory
from errors import StorageError, ValidationError
from logging_config import setup_logging
from schemas import Book, BookCreate
from seed import seed_books

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = make_engine(settings.database_url)
        try:
            await init_db(engine)
            app.state.store = BookStore(make_session_factory(engine))
            if settings.seed_on_startup:
                # any failure here aborts startup
                await seed_books(app.state.store)
            yield
        finally:
            await engine.dispose()

    app = FastAPI(title="bookshelf", lifespan=lifespan)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"detail": exc.errors})

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.get("/books", response_model=list[Book])
    async def list_books(request: Request):
        return await request.app.state.store.find_all()

    @app.get("/books/{book_id}", response_model=Book)
    async def get_book(book_id: int, request: Request):
        book = await request.app.state.store.find_by_id(book_id)
        if not book:
            raise HTTPException(404, "Book not found")
        return book

    @app.post("/books", response_model=Book, status_code=201)
    async def create_book(book_data: BookCreate, request: Request):
        return await request.app.state.store.save(book_data)

    @app.put("/books/{book_id}", response_model=Book)
    async def update_book(book_id: int, book_data: BookCreate, request: Request):
        return await request.app.state.store.save({**book_data.model_dump(), "id": book_id})

    @app.delete("/books/{book_id}", status_code=204)
    async def delete_book(book_id: int, request: Request):
        if not await request.app.state.store.delete(book_id):
            raise HTTPException(404, "Book not found")
        return Response(status_code=204)

    return app


def build_app() -> FastAPI:
    """uvicorn --factory main:build_app"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.json_logs)
    return create_app(settings)
