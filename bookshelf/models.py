"""Book entity."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Book:
    title: str
    author: str
    published: date
    id: Optional[int] = None    # assigned by the store on insert

    def format(self) -> str:
        return (f"ID: {self.id}, Title: {self.title}, Author: {self.author}, "
                f"Published: {self.published.isoformat()}")
