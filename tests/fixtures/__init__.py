"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    INVALID_ISBNS,
    make_book_data,
)

__all__ = [
    "SAMPLE_BOOKS",
    "INVALID_ISBNS",
    "make_book_data",
]
