"""Read-only, case-insensitive store of parsed SQL statements."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from sqlblocks.parsing.errors import StatementNotFoundError
from sqlblocks.parsing.schemas import ParsedStatement


class StatementRegistry:
    """Parsed statements looked up by tag name, ignoring case.

    A registry is filled once by the parser and is read-only afterwards.
    Iterating yields ParsedStatement values in no guaranteed order.
    """

    def __init__(self, statements: Iterable[ParsedStatement] = ()) -> None:
        """Build the registry; the first statement for a tag wins.

        Args:
            statements: Statements to store.
        """
        self._statements: dict[str, ParsedStatement] = {}
        for statement in statements:
            self._statements.setdefault(statement.name.casefold(), statement)

    def __getitem__(self, name: str) -> str:
        """Get the body for a tag.

        Raises:
            StatementNotFoundError: If no statement has that tag.
        """
        if name is None:
            raise TypeError("Tag name must not be None")
        statement = self._statements.get(name.casefold())
        if statement is None:
            raise StatementNotFoundError(name)
        return statement.body

    def try_get(self, name: str) -> str | None:
        """Get the body for a tag, or None when it is not registered."""
        if name is None:
            raise TypeError("Tag name must not be None")
        statement = self._statements.get(name.casefold())
        return statement.body if statement else None

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get the body for a tag with a fallback value."""
        body = self.try_get(name)
        return default if body is None else body

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._statements

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[ParsedStatement]:
        return iter(self._statements.values())

    def __bool__(self) -> bool:
        return bool(self._statements)

    @property
    def names(self) -> list[str]:
        """Registered tag names in their original casing."""
        return [statement.name for statement in self._statements.values()]

    def items(self) -> list[tuple[str, str]]:
        """All (name, body) pairs."""
        return [(statement.name, statement.body) for statement in self._statements.values()]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain name -> body dictionary."""
        return dict(self.items())

    def __repr__(self) -> str:
        return f"StatementRegistry(names={self.names!r})"

    def __str__(self) -> str:
        return "".join(statement.render() for statement in self._statements.values())
