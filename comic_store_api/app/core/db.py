"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), running a unit of work in a transaction
(``transaction``) and applying migrations on application start
(``init_db``).

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS subscriptions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            plan TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            address TEXT,
            registration_date TEXT NOT NULL,
            subscription_start TEXT,
            subscription_end TEXT,
            role TEXT NOT NULL DEFAULT 'CLIENTE',
            subscription_id INTEGER,
            FOREIGN KEY(subscription_id) REFERENCES subscriptions(id) ON DELETE SET NULL
        );

        CREATE TABLE IF NOT EXISTS comics (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            author TEXT NOT NULL,
            publisher TEXT NOT NULL,
            description TEXT,
            publication_date TEXT NOT NULL,
            available_for_auction INTEGER NOT NULL DEFAULT 0,
            category TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS wishlists (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            creation_date TEXT NOT NULL,
            owner_id INTEGER UNIQUE,
            FOREIGN KEY(owner_id) REFERENCES users(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: many-to-many join table between wishlists and comics
    (
        2,
        """
        -- position keeps the insertion order of the wishlist items.
        CREATE TABLE IF NOT EXISTS comics_in_wishlist (
            wishlist_id INTEGER NOT NULL,
            comic_id INTEGER NOT NULL,
            position INTEGER NOT NULL,
            PRIMARY KEY (wishlist_id, comic_id),
            FOREIGN KEY(wishlist_id) REFERENCES wishlists(id) ON DELETE CASCADE,
            FOREIGN KEY(comic_id) REFERENCES comics(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_comics_in_wishlist_comic_id ON comics_in_wishlist(comic_id);
        """,
    ),
    # Migration 3: sales and auctions
    (
        3,
        """
        CREATE TABLE IF NOT EXISTS comic_copies (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            condition TEXT NOT NULL,
            price REAL NOT NULL,
            available INTEGER NOT NULL DEFAULT 1,
            comic_id INTEGER NOT NULL,
            FOREIGN KEY(comic_id) REFERENCES comics(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS auctions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            start_date TEXT NOT NULL,
            end_date TEXT NOT NULL,
            current_offer REAL NOT NULL,
            status TEXT NOT NULL DEFAULT 'IN_CORSO',
            copy_id INTEGER NOT NULL,
            best_bidder_id INTEGER,
            FOREIGN KEY(copy_id) REFERENCES comic_copies(id) ON DELETE CASCADE,
            FOREIGN KEY(best_bidder_id) REFERENCES users(id) ON DELETE SET NULL
        );

        CREATE TABLE IF NOT EXISTS orders (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            final_price REAL NOT NULL,
            order_date TEXT NOT NULL,
            status TEXT NOT NULL DEFAULT 'IN_CONSEGNA',
            user_id INTEGER NOT NULL,
            FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS order_details (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            quantity INTEGER NOT NULL,
            copy_id INTEGER NOT NULL,
            order_id INTEGER NOT NULL,
            FOREIGN KEY(copy_id) REFERENCES comic_copies(id) ON DELETE CASCADE,
            FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_comic_copies_comic_id ON comic_copies(comic_id);
        CREATE INDEX IF NOT EXISTS idx_auctions_copy_id ON auctions(copy_id);
        CREATE INDEX IF NOT EXISTS idx_orders_user_id ON orders(user_id);
        CREATE INDEX IF NOT EXISTS idx_order_details_order_id ON order_details(order_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.  The setting is
    read on every call.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # comic_store_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite disables it by default, and the cascade and
    ``SET NULL`` rules of the schema depend on it.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Yield a connection, commit on success and roll back on error.

    The connection is always closed on exit.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any migration in
    ``MIGRATIONS`` with a higher version number.
    """
    with transaction() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version
