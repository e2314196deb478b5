from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4


@dataclass
class Book:
    id: UUID = field(default_factory=uuid4)
    author_id: UUID | None = None
    title: str = ""
    description: str | None = None


@dataclass
class Author:
    id: UUID = field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    date_of_birth: date = field(default_factory=date.today)
    genre: str = ""
    books: list[Book] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def age(self, today: date | None = None) -> int:
        """Age in whole years; the birthday has to have passed this year."""
        today = today or date.today()
        years = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            years -= 1
        return years
