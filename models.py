# models.py
from sqlalchemy import Column, Integer, String, Numeric
from database import Base


class Book(Base):
    __tablename__ = "books"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False, index=True)
    author = Column(String, nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
