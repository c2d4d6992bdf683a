"""
基础路由：问候、状态页、健康检查
"""
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

hello_router = APIRouter(tags=["Hello"])

STATUS_PAGE = """<!doctype html>
<html>
    <head><title>Status page</title></head>
    <body>
        <h1>Status</h1>
        <p>The server is working fine. Bye bye!</p>
    </body>
</html>"""


@hello_router.get("/", response_class=PlainTextResponse)
async def hello():
    return "Hello World!"


@hello_router.get("/hello", response_class=PlainTextResponse)
async def hello_books():
    return "Hello World"


@hello_router.get("/helloAdded",response_class=PlainTextResponse)
async def hello_added():
    return "Hello World from newly added endpoint"


@hello_router.get("/status", response_class=HTMLResponse)
async def status_page():
    """状态页"""
    return STATUS_PAGE


@hello_router.get("/health")
async def health_check(request: Request):
    """健康检查接口"""
    database_ok = await request.app.state.database.ping()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "connected" if database_ok else "unavailable",
    }


def register(app: FastAPI) -> None:
    """注册基础路由"""
    app.include_router(hello_router)
