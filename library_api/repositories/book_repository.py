"""
书籍数据访问层
"""
import logging
from typing import List, Optional

import aiosqlite
from pydantic import ValidationError

from ..exceptions import DuplicateBookError, PersistenceError
from ..models.book import Book
from ..models.database import Database

logger = logging.getLogger(__name__)

SELECT_COLUMNS = "isbn, title, author, shortDescription, pageCount, releaseDate"


def escape_like(term: str) -> str:
    """转义LIKE通配符，使 % _ \\ 按字面匹配"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class BookRepository:
    """书籍仓库类"""

    def __init__(self, database: Database):
        self.database = database

    async def create(self, book: Book) -> None:
        """创建书籍，主键冲突时抛出 DuplicateBookError"""
        query = """
            INSERT INTO books (isbn, title, author, shortDescription, pageCount, releaseDate)
            VALUES (:isbn, :title, :author, :shortDescription, :pageCount, :releaseDate)
        """
        async with self.database.connection() as conn:
            try:
                await conn.execute(query, book.to_row())
            except aiosqlite.IntegrityError as e:
                if "UNIQUE" in str(e) or "PRIMARY KEY" in str(e):
                    raise DuplicateBookError(book.isbn) from e
                raise

    async def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍"""
        query = f"SELECT {SELECT_COLUMNS} FROM books WHERE isbn = ? LIMIT 1"
        rows = await self._fetch(query, (isbn,))
        return rows[0] if rows else None

    async def get_all(self) -> List[Book]:
        """获取所有书籍，顺序由存储决定"""
        return await self._fetch(f"SELECT {SELECT_COLUMNS} FROM books")

    async def search_by_title(self, title_keyword: str) -> List[Book]:
        """根据标题搜索书籍"""
        query = f"SELECT {SELECT_COLUMNS} FROM books WHERE title LIKE ? ESCAPE '\\'"
        return await self._fetch(query, (f"%{escape_like(title_keyword)}%",))

    async def update(self, book: Book) -> bool:
        """更新除ISBN外的所有字段，返回是否有记录被修改"""
        query = """
            UPDATE books
            SET title = :title,
                author = :author,
                shortDescription = :shortDescription,
                pageCount = :pageCount,
                releaseDate = :releaseDate
            WHERE isbn = :isbn
        """
        async with self.database.connection() as conn:
            cursor = await conn.execute(query, book.to_row())
            return cursor.rowcount > 0

    async def delete(self, isbn: str) -> bool:
        """删除书籍，返回是否有记录被删除"""
        async with self.database.connection() as conn:
            cursor = await conn.execute("DELETE FROM books WHERE isbn = ?", (isbn,))
            return cursor.rowcount > 0

    async def _fetch(self, query: str, params: tuple = ()) -> List[Book]:
        """执行查询并转换为Book列表"""
        async with self.database.connection() as conn:
            async with conn.execute(query, params) as cursor:
                rows = await cursor.fetchall()
        try:
            return [Book.from_row(row) for row in rows]
        except ValidationError as e:
            logger.error(f"数据库中存在格式错误的书籍记录: {e}")
            raise PersistenceError("Malformed book record in store") from e
