#!/usr/bin/env python3
"""
Favorites Database
==================
Keeps the generated names a user wants to hold on to.

Storage: SQLite database (path from favorites.db_path in app.yaml)
"""

import sqlite3
import json
import logging
from datetime import datetime
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, List

from .settings import get_setting, resolve_path

logger = logging.getLogger(__name__)


@dataclass
class Favorite:
    """A saved name"""
    id: Optional[int]
    name: str
    category: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'note': self.note,
            'created_at': self.created_at,
        }


class FavoritesDB:
    """
    SQLite store for favorite names.

    Usage:
        db = FavoritesDB()
        db.add("Belarwood", category="place")
        db.list(category="place")
        db.remove("Belarwood")

    Names are unique case-insensitively.
    """

    def __init__(self, db_path: str = None):
        if db_path is None:
            db_path = resolve_path(get_setting('favorites.db_path', '~/.namekit/favorites.db'))

        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create database tables"""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS favorites (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    name_lower TEXT NOT NULL UNIQUE,
                    category TEXT,
                    note TEXT,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_fav_category ON favorites(category)")
            conn.commit()

    def _now(self) -> str:
        return datetime.now().isoformat()

    def _row_to_favorite(self, row) -> Favorite:
        return Favorite(
            id=row['id'],
            name=row['name'],
            category=row['category'],
            note=row['note'],
            created_at=row['created_at'],
        )

    def add(self, name: str, category: str = None, note: str = None) -> Optional[int]:
        """
        Save a name.

        Returns:
            ID of the new entry, or None if the name is already saved
        """
        try:
            with sqlite3.connect(self.db_path) as conn:
                cursor = conn.execute("""
                    INSERT INTO favorites (name, name_lower, category, note, created_at)
                    VALUES (?, ?, ?, ?, ?)
                """, (name, name.lower(), category, note, self._now()))
                conn.commit()
                return cursor.lastrowid
        except sqlite3.IntegrityError:
            logger.debug(f"Favorite already saved: {name}")
            return None

    def get(self, name: str) -> Optional[Favorite]:
        """Get a favorite by its text"""
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM favorites WHERE name_lower = ?", (name.lower(),)
            ).fetchone()
            return self._row_to_favorite(row) if row else None

    def remove(self, name: str) -> bool:
        """Delete a favorite"""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "DELETE FROM favorites WHERE name_lower = ?", (name.lower(),)
            )
            conn.commit()
            return cursor.rowcount > 0

    def list(self, category: str = None, limit: int = None) -> List[Favorite]:
        """List favorites, oldest first"""
        query = "SELECT * FROM favorites"
        params = []
        if category:
            query += " WHERE category = ?"
            params.append(category)
        query += " ORDER BY id ASC"
        if limit:
            query += " LIMIT ?"
            params.append(limit)

        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.execute(query, params)
            return [self._row_to_favorite(row) for row in cursor.fetchall()]

    def count(self) -> int:
        """Count saved names"""
        with sqlite3.connect(self.db_path) as conn:
            return conn.execute("SELECT COUNT(*) FROM favorites").fetchone()[0]

    def clear(self) -> int:
        """Delete every favorite, returning how many were removed"""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM favorites")
            conn.commit()
            return cursor.rowcount

    def export_json(self, filepath: str = None) -> str:
        """Export all favorites to JSON"""
        data = [fav.to_dict() for fav in self.list()]
        json_str = json.dumps(data, indent=2, ensure_ascii=False)
        if filepath:
            Path(filepath).write_text(json_str, encoding='utf-8')
        return json_str


# Singleton
_default_db = None

def get_favorites_db() -> FavoritesDB:
    """Get default database instance"""
    global _default_db
    if _default_db is None:
        _default_db = FavoritesDB()
    return _default_db
