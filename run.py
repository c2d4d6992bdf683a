#!/usr/bin/env python3
"""
启动脚本 - 图书管理API
使用方法: python run.py
"""
import logging

import uvicorn

from library_api.config import settings
from library_api.main import setup_logging

# 设置特定模块的日志级别
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

if __name__ == "__main__":
    setup_logging(settings.log_level)

    logging.info("=" * 60)
    logging.info(f"启动{settings.app_title} v{settings.app_version}")
    logging.info(f"数据库: {settings.database_url}")
    logging.info(f"API文档: http://{settings.host}:{settings.port}/docs")
    logging.info("=" * 60)

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        reload_dirs=["library_api"],
        log_level=settings.log_level.lower(),
    )
