# This file defines the request and response models for the books endpoints.
# The same Book model is used to decode POST bodies, to map table rows and to encode responses.
# Missing fields fall back to zero values; present fields are type-coerced and ids must fit in 64 bits.

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MIN_BOOK_ID = -(2**63)
MAX_BOOK_ID = 2**63 - 1

BookId = Annotated[int, Field(ge=MIN_BOOK_ID, le=MAX_BOOK_ID)]


class Book(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: BookId = 0
    title: str = ""
    author: str = ""


class BookCreatedResponse(BaseModel):
    bookid: int
