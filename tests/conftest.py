"""tests/conftest.py – shared fixtures for all tests."""
import pytest
from unittest.mock import patch

from market_api.core.auth import Identity, TokenService
from market_api.core.foods import FoodService
from market_api.core.orders import OrderService
from market_api.db.models import Food
from market_api.db.session import Database

TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef"

SELLER = "s@x.com"
BUYER  = "b@x.com"


def make_food(db: Database, **kw) -> int:
    """Insert 1 food (mặc định: quantity=10, order_count=2, seller s@x.com), trả về id."""
    defaults = dict(
        food_name="Phở bò", food_image="https://img/pho.jpg", category="Noodle",
        origin="Vietnam", description="", price=5.5,
        quantity=10, order_count=2, seller_name="Seller", seller_email=SELLER,
    )
    defaults.update(kw)
    with db.session() as session:
        food = Food(**defaults)
        session.add(food)
        session.flush()
        return food.id


@pytest.fixture
def db(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'test.db'}")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_SECRET, ttl_seconds=3600)


@pytest.fixture
def food_service(db) -> FoodService:
    return FoodService(db)


@pytest.fixture
def order_service(db) -> OrderService:
    return OrderService(db)


@pytest.fixture
def seller() -> Identity:
    return Identity(email=SELLER)


@pytest.fixture
def buyer() -> Identity:
    return Identity(email=BUYER)


@pytest.fixture
def mock_services(db, tokens, food_service, order_service):
    """Thay singletons trong deps bằng service chạy trên SQLite tạm."""
    with (
        patch("market_api.deps._db", db),
        patch("market_api.deps._tokens", tokens),
        patch("market_api.deps._foods", food_service),
        patch("market_api.deps._orders", order_service),
    ):
        yield


@pytest.fixture
def client(mock_services):
    from fastapi.testclient import TestClient
    from market_api.main import app
    # https để cookie `secure` được gửi lại
    return TestClient(app, base_url="https://testserver")


@pytest.fixture
def login(client, tokens):
    """login("a@x.com") → set cookie token cho client."""
    def _login(email: str) -> str:
        token = tokens.issue({"email": email})
        client.cookies.set("token", token)
        return token
    return _login


@pytest.fixture
def secret() -> str:
    return TEST_SECRET


@pytest.fixture
def add_food(db):
    """add_food(quantity=3, ...) → id của food mới."""
    def _add(**kw) -> int:
        return make_food(db, **kw)
    return _add
