from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BookBase(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class BookCreate(BookBase):
    pass


class Book(BookBase):
    id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True, revalidate_instances="always")
