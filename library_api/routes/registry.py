"""
路由注册表
显式列出每个路由组件及其注册函数，启动时依次注册
"""
from typing import Callable, Dict

from fastapi import FastAPI

from . import book_routes, hello_routes

ROUTE_REGISTRY: Dict[str, Callable[[FastAPI], None]] = {
    "hello": hello_routes.register,
    "books": book_routes.register,
}


def register_routes(app: FastAPI) -> None:
    """注册所有路由组件"""
    for register in ROUTE_REGISTRY.values():
        register(app)
