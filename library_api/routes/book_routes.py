"""
书籍管理路由
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse

from ..auth import verify_api_key
from ..models.book import Book
from ..services.book_service import BookOutcome, BookService
from ..utils.validators import ValidationFailure, duplicate_isbn_failure, validate_book

logger = logging.getLogger(__name__)

# 创建路由
book_router = APIRouter(
    prefix="/books",
    tags=["Books"],
    dependencies=[Depends(verify_api_key)],
)

VIOLATIONS_RESPONSE = {
    400: {"description": "字段校验失败列表 [{propertyName, errorMessage}]"},
}


def get_book_service(request: Request) -> BookService:
    """从应用状态获取书籍服务"""
    return request.app.state.book_service


def bad_request(failures: List[ValidationFailure]) -> JSONResponse:
    """构造400校验失败响应"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[failure.to_dict() for failure in failures],
    )


@book_router.post(
    "",
    name="CreateBook",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses=VIOLATIONS_RESPONSE,
)
async def create_book(book: Book, book_service: BookService = Depends(get_book_service)):
    """创建新书籍"""
    failures = validate_book(book)
    if failures:
        return bad_request(failures)

    outcome = await book_service.create_book(book)
    if outcome is BookOutcome.CONFLICT:
        return bad_request([duplicate_isbn_failure()])

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=book.model_dump(mode="json", by_alias=True),
        headers={"Location": f"/books/{book.isbn}"},
    )


@book_router.get("", name="GetBooks", response_model=List[Book])
async def get_books(
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    book_service: BookService = Depends(get_book_service),
):
    """获取书籍列表，searchTerm 非空白时按标题过滤"""
    if search_term is not None and search_term.strip():
        return await book_service.search_books_by_title(search_term)

    return await book_service.list_books()


@book_router.get(
    "/{isbn}",
    name="GetBook",
    response_model=Book,
    responses={404: {"description": "书籍不存在"}},
)
async def get_book(isbn: str, book_service: BookService = Depends(get_book_service)):
    """根据ISBN获取书籍"""
    book = await book_service.get_book_by_isbn(isbn)
    if book is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book


@book_router.put(
    "/{isbn}",
    name="UpdateBook",
    response_model=Book,
    responses={**VIOLATIONS_RESPONSE, 404: {"description": "书籍不存在"}},
)
async def update_book(
    isbn: str,
    book: Book,
    book_service: BookService = Depends(get_book_service),
):
    """更新书籍信息，以路径中的ISBN为准"""
    book.isbn = isbn
    failures = validate_book(book)
    if failures:
        return bad_request(failures)

    outcome = await book_service.update_book(book)
    if outcome is BookOutcome.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return book


@book_router.delete(
    "/{isbn}",
    name="DeleteBook",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "书籍不存在"}},
)
async def delete_book(isbn: str, book_service: BookService = Depends(get_book_service)):
    """删除书籍"""
    outcome = await book_service.delete_book(isbn)
    if outcome is BookOutcome.NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def register(app: FastAPI) -> None:
    """注册书籍路由"""
    app.include_router(book_router)
