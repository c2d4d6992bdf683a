"""
书籍校验规则
纯函数，无副作用、无I/O
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from ..models.book import Book

ISBN_PATTERN = re.compile(r"\d{3}-\d{10}", re.ASCII)

INVALID_ISBN_MESSAGE = "Value was not valid ISBN-13"
EMPTY_TITLE_MESSAGE = "'Title' must not be empty."
NEGATIVE_PAGE_COUNT_MESSAGE = "'Page Count' must be greater than or equal to '0'."
DUPLICATE_ISBN_MESSAGE = "A book with the same ISBN-13 already exists or invalid data provided."


@dataclass(frozen=True)
class ValidationFailure:
    """字段级校验失败"""
    property_name: str
    error_message: str

    def to_dict(self) -> Dict[str, str]:
        return {"propertyName": self.property_name, "errorMessage": self.error_message}


def is_valid_isbn(isbn: str) -> bool:
    """ISBN 必须整体匹配 NNN-NNNNNNNNNN（不校验校验位）"""
    return ISBN_PATTERN.fullmatch(isbn) is not None


def validate_book(book: Book) -> List[ValidationFailure]:
    """校验书籍，返回按规则顺序排列的失败列表，空列表表示通过"""
    failures = []

    if not is_valid_isbn(book.isbn):
        failures.append(ValidationFailure("isbn", INVALID_ISBN_MESSAGE))

    if not book.title:
        failures.append(ValidationFailure("title", EMPTY_TITLE_MESSAGE))

    if book.page_count < 0:
        failures.append(ValidationFailure("pageCount", NEGATIVE_PAGE_COUNT_MESSAGE))

    return failures


def duplicate_isbn_failure() -> ValidationFailure:
    """创建时ISBN已存在的合成失败项"""
    return ValidationFailure("isbn", DUPLICATE_ISBN_MESSAGE)


def failures_from_request_errors(errors: Sequence[Dict[str, Any]]) -> List[ValidationFailure]:
    """把请求体解析错误转换为校验失败列表

    字段名取错误位置中最后一个字符串段（即JSON别名），
    整个请求体缺失或无法解析时为 "body"。
    """
    failures = []
    for error in errors:
        # JSON解析错误的位置是字节偏移量
        loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        property_name = str(loc[-1]) if loc else "body"
        failures.append(ValidationFailure(property_name, error.get("msg", "Invalid value")))
    return failures
