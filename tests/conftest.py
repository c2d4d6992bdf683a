"""
pytest配置文件，定义全局fixtures和测试配置
"""
import random
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Callable, Generator

import pytest
from fastapi.testclient import TestClient

from library_api.config import Settings
from library_api.main import create_app
from library_api.models.database import Database
from tests.fixtures.sample_data import make_book_data


@pytest.fixture
def temp_db_path() -> Generator[str, None, None]:
    """创建临时数据库文件路径"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield str(Path(temp_dir) / "library_test.db")


@pytest.fixture
async def test_db(temp_db_path: str) -> AsyncGenerator[Database, None]:
    """创建已初始化的测试数据库实例"""
    test_database = Database(temp_db_path)
    await test_database.init_database()
    yield test_database


@pytest.fixture
def test_settings(temp_db_path: str) -> Settings:
    """测试配置，使用临时数据库且不校验API Key"""
    return Settings(database_url=temp_db_path, api_key="", log_level="WARNING")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端"""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def isbn_generator() -> Callable[[], str]:
    """确定性的ISBN生成器（固定种子）"""
    rng = random.Random(20261001)

    def generate() -> str:
        return f"{rng.randint(100, 999)}-{rng.randint(1000000000, 2100999999)}"

    return generate


@pytest.fixture
def book_factory(isbn_generator):
    """生成带唯一ISBN的书籍请求数据"""
    def factory(title: str = "The Dirty Coder", **overrides):
        data = make_book_data(isbn=isbn_generator(), title=title)
        data.update(overrides)
        return data

    return factory


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
