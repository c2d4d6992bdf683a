"""
数据库连接管理
使用SQLite作为持久化存储，每次调用获取独立连接
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)

BOOKS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS books (
        isbn TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        author TEXT NOT NULL,
        shortDescription TEXT NOT NULL,
        pageCount INTEGER,
        releaseDate TEXT NOT NULL
    )
"""


class Database:
    """数据库连接管理器"""

    def __init__(self, db_path: str = "data/library.db"):
        self.db_path = db_path

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """获取数据库连接的上下文管理器

        正常退出时提交，出错时回滚，始终关闭连接。
        aiosqlite 的错误统一包装为 PersistenceError。
        """
        try:
            conn = await aiosqlite.connect(self.db_path)
        except aiosqlite.Error as e:
            logger.error(f"数据库连接失败: {self.db_path}: {e}")
            raise PersistenceError(f"Cannot connect to database: {e}") from e

        conn.row_factory = aiosqlite.Row
        try:
            yield conn
            await conn.commit()
        except aiosqlite.Error as e:
            await conn.rollback()
            raise PersistenceError(str(e)) from e
        except Exception:
            await conn.rollback()
            raise
        finally:
            await conn.close()

    async def init_database(self) -> None:
        """初始化数据库表结构（幂等）"""
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        async with self.connection() as conn:
            await conn.execute(BOOKS_TABLE_SQL)
        logger.info(f"数据库初始化完成: {self.db_path}")

    async def ping(self) -> bool:
        """检查数据库是否可用（只打开已存在的数据库文件，不会新建）"""
        uri = f"{Path(self.db_path).resolve().as_uri()}?mode=rw"
        try:
            async with aiosqlite.connect(uri, uri=True) as conn:
                await conn.execute("SELECT 1")
            return True
        except aiosqlite.Error as e:
            logger.warning(f"数据库不可用: {self.db_path}: {e}")
            return False
