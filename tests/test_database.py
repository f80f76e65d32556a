"""Tests for the MongoDB connection handle.

Motor connects lazily, so no running server is needed.
"""

import pytest

from models.database import Database


class TestDatabase:

    async def test_connect_uses_database_named_in_uri(self):
        db = Database("mongodb://localhost:27017/x", "fallback")
        await db.connect()
        try:
            assert db.database.name == "x"
            assert db.users.name == "users"
            assert db.exercises.name == "exercises"
            assert db.logs.name == "logs"
        finally:
            await db.close()

    async def test_connect_falls_back_to_configured_name(self):
        db = Database("mongodb://localhost:27017", "fallback")
        await db.connect()
        try:
            assert db.database.name == "fallback"
        finally:
            await db.close()

    async def test_collections_unavailable_before_connect(self):
        db = Database("mongodb://localhost:27017/x")
        with pytest.raises(RuntimeError):
            db.users

    async def test_close_resets_handle(self):
        db = Database("mongodb://localhost:27017/x")
        await db.connect()
        await db.close()

        assert db.client is None
        with pytest.raises(RuntimeError):
            db.logs
