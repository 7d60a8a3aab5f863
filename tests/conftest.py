"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock, Mock

# Set test environment variables (Supabase stays unconfigured so the mock catalog is used)
os.environ.setdefault("TRANEX_SITE_URL", "https://tranex.test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tranex.cart import CartStore  # noqa: E402
from tranex.storage import MemoryStorage  # noqa: E402


class FailingStorage:
    """Storage whose reads and writes always fail."""

    def __init__(self, fail_reads: bool = True, fail_writes: bool = True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.data: dict[str, str] = {}

    def get(self, key):
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise OSError("quota exceeded")
        self.data[key] = value

    def remove(self, key):
        self.data.pop(key, None)


class RecordingStorage(MemoryStorage):
    """Memory storage that counts writes."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key, value):
        self.writes.append((key, value))
        super().set(key, value)


@pytest.fixture
def storage():
    """Empty recording storage"""
    return RecordingStorage()


@pytest.fixture
def cart(storage):
    """Cart store over empty storage"""
    return CartStore(storage)


@pytest.fixture
def widget():
    """Sample product record"""
    return {"id": "A", "name": "Widget", "price": 10, "image": "x"}


@pytest.fixture
def sample_product_row():
    """Sample products table row"""
    return {
        "id": "product-1",
        "name": "TRANEX Flywheel Pro",
        "description": "Professional-grade flywheel",
        "price": 899,
        "original_price": 999,
        "category": "flywheel-training",
        "images": {"main": "/assets/products/flywheel-pro-1.jpg", "gallery": []},
        "is_active": True,
        "created_at": "2025-01-01T00:00:00Z",
        "unknown_column": "ignored",
    }


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client with a chainable query builder"""
    client = Mock()

    table_mock = Mock()
    for method in ("select", "eq", "neq", "ilike", "order", "range", "limit"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    client.auth = Mock()
    for method in (
        "sign_up",
        "sign_in_with_password",
        "sign_out",
        "reset_password_for_email",
        "update_user",
        "get_user",
        "get_session",
    ):
        setattr(client.auth, method, AsyncMock())

    return client
