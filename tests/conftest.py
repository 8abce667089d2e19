import sqlite3

import pytest

from sqlchain.connection import connect


@pytest.fixture(scope="function")
def shop_db(tmp_path):
    """A temporary SQLite database with shops, registered under the name "shop"."""
    path = tmp_path / "shop.sqlite3"
    connection = sqlite3.connect(path)
    connection.executescript(
        """
        CREATE TABLE m_shop (id INTEGER PRIMARY KEY, name TEXT, city TEXT, closed INTEGER);
        CREATE TABLE shop (id INTEGER PRIMARY KEY, mid INTEGER, state INTEGER);
        INSERT INTO m_shop VALUES (1, 'A', '上海', 0), (2, 'B', '北京', 0), (3, 'C', '上海', 1), (4, 'D', '上海', 0);
        INSERT INTO shop VALUES (10, 1, 3), (11, 2, 3), (12, 3, 3), (13, 4, 1);
        """
    )
    connection.commit()
    connection.close()
    connect(f"sqlite:///{path}", name="shop")
    yield "shop"
