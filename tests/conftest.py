"""Pytest fixtures for sqlblocks tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sqlblocks.parsing.parser import SqlParser
from sqlblocks.parsing.schemas import Source

USERS_SQL = """-- #start# GetAllUsers
SELECT *
FROM users
-- #end# GetAllUsers

-- #start# GetActiveUsers
SELECT *
FROM users
WHERE active = 1
-- #end# GetActiveUsers
"""

ORDERS_SQL = """-- #start# GetOrdersByUser
SELECT id, total
FROM orders

WHERE user_id = @userId
-- #end# GetOrdersByUser
"""


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def parser() -> SqlParser:
    """Parser with default settings."""
    return SqlParser()


@pytest.fixture
def users_source() -> Source:
    """Source with two well-formed blocks."""
    return Source(content=USERS_SQL, name="users.sql")


@pytest.fixture
def orders_source() -> Source:
    """Source with one block containing a blank line."""
    return Source(content=ORDERS_SQL, name="orders.sql")


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project with SQL files in the default sql_files directory.

    Structure:
    - sql_files/users.sql
    - sql_files/reports/orders.sql
    - sql_files/notes.txt (ignored by the *.sql pattern)
    """
    sql_dir = temp_dir / "sql_files"
    (sql_dir / "reports").mkdir(parents=True)
    (sql_dir / "users.sql").write_text(USERS_SQL)
    (sql_dir / "reports" / "orders.sql").write_text(ORDERS_SQL)
    (sql_dir / "notes.txt").write_text("-- #start# Ignored\nSELECT 1\n")
    return temp_dir


@pytest.fixture
def sql_dir(project_dir: Path) -> Path:
    """The SQL directory of the sample project."""
    return project_dir / "sql_files"
