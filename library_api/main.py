#!/usr/bin/env python3
"""
主应用入口
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .exceptions import PersistenceError
from .models.database import Database
from .repositories.book_repository import BookRepository
from .routes.registry import register_routes
from .services.book_service import BookService
from .utils.validators import failures_from_request_errors

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO") -> None:
    """配置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期：启动时确保表结构存在"""
    logger.info("应用启动中...")
    await app.state.database.init_database()
    logger.info("数据库连接就绪")

    yield

    logger.info("应用关闭中...")


async def persistence_error_handler(request: Request, exc: PersistenceError):
    """存储层异常统一返回500"""
    logger.error(f"存储层异常: {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """请求体解析错误转换为与校验失败相同的400格式"""
    failures = failures_from_request_errors(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=[failure.to_dict() for failure in failures],
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """创建并配置FastAPI应用"""
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # 依赖装配：每个请求共享无状态的服务实例
    database = Database(settings.database_url)
    app.state.settings = settings
    app.state.database = database
    app.state.book_service = BookService(BookRepository(database))

    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    register_routes(app)
    return app


app = create_app()


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """运行服务器"""
    uvicorn.run(
        "library_api.main:app",
        host=host or default_settings.host,
        port=port or default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
