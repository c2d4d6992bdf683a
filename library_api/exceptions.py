"""
业务异常定义

冲突(Conflict)与未找到(NotFound)属于正常业务结果，由服务层以返回值表达，
这里只定义基础设施层面的异常。
"""


class LibraryApiException(Exception):
    """基础异常类"""
    pass


class PersistenceError(LibraryApiException):
    """存储层异常（数据库不可达、意外的约束失败、数据格式错误）"""
    pass


class DuplicateBookError(LibraryApiException):
    """重复书籍异常（主键冲突），只在仓库层与服务层之间传递"""

    def __init__(self, isbn: str):
        super().__init__(f"Book with ISBN {isbn} already exists")
        self.isbn = isbn
