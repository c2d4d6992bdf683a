"""
书籍业务服务层

冲突和未找到作为 BookOutcome 返回，不抛异常；
存储层异常（PersistenceError）原样向上传播。
"""
import logging
from enum import Enum
from typing import List, Optional

from ..exceptions import DuplicateBookError
from ..models.book import Book
from ..repositories.book_repository import BookRepository

logger = logging.getLogger(__name__)


class BookOutcome(str, Enum):
    """变更操作结果"""
    CREATED = "created"
    CONFLICT = "conflict"
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"


class BookService:
    """书籍服务类"""

    def __init__(self, book_repository: BookRepository):
        self.book_repository = book_repository

    async def create_book(self, book: Book) -> BookOutcome:
        """创建书籍

        先按ISBN检查是否存在，这只是快速路径；并发创建时以主键约束为准，
        仓库抛出的 DuplicateBookError 同样视为冲突。
        """
        existing_book = await self.book_repository.get_by_isbn(book.isbn)
        if existing_book:
            logger.info(f"书籍已存在: {book.isbn}")
            return BookOutcome.CONFLICT

        try:
            await self.book_repository.create(book)
        except DuplicateBookError:
            logger.warning(f"并发创建导致主键冲突: {book.isbn}")
            return BookOutcome.CONFLICT

        logger.info(f"书籍创建成功: {book.isbn}")
        return BookOutcome.CREATED

    async def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        """根据ISBN获取书籍"""
        return await self.book_repository.get_by_isbn(isbn)

    async def list_books(self) -> List[Book]:
        """获取所有书籍"""
        return await self.book_repository.get_all()

    async def search_books_by_title(self, title_keyword: str) -> List[Book]:
        """根据标题搜索书籍"""
        return await self.book_repository.search_by_title(title_keyword)

    async def update_book(self, book: Book) -> BookOutcome:
        """更新书籍，ISBN由调用方从路径参数写入"""
        existing_book = await self.book_repository.get_by_isbn(book.isbn)
        if not existing_book:
            logger.info(f"更新的书籍不存在: {book.isbn}")
            return BookOutcome.NOT_FOUND

        # 检查与写入之间记录可能已被删除
        if not await self.book_repository.update(book):
            logger.warning(f"书籍在更新前被删除: {book.isbn}")
            return BookOutcome.NOT_FOUND

        logger.info(f"书籍更新成功: {book.isbn}")
        return BookOutcome.UPDATED

    async def delete_book(self, isbn: str) -> BookOutcome:
        """删除书籍"""
        if not await self.book_repository.delete(isbn):
            logger.info(f"删除的书籍不存在: {isbn}")
            return BookOutcome.NOT_FOUND

        logger.info(f"书籍删除成功: {isbn}")
        return BookOutcome.DELETED
