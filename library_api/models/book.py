"""
书籍模型
"""
from datetime import date
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """书籍模型

    JSON 与数据库列均使用 camelCase 名称（shortDescription 等），
    Python 侧使用 snake_case 属性。isbn 和 title 缺省为空字符串，
    由校验规则而不是请求体解析来报告。
    """
    model_config = ConfigDict(populate_by_name=True)

    isbn: str = ""  # 唯一业务标识（主键）
    title: str = ""
    author: str
    short_description: str = Field(..., alias="shortDescription")
    page_count: int = Field(..., alias="pageCount")
    release_date: date = Field(..., alias="releaseDate")

    def to_row(self) -> Dict[str, Any]:
        """转换为数据库参数字典"""
        return {
            "isbn": self.isbn,
            "title": self.title,
            "author": self.author,
            "shortDescription": self.short_description,
            "pageCount": self.page_count,
            "releaseDate": self.release_date.isoformat(),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Book":
        """从数据库行构建"""
        return cls.model_validate(dict(row))
