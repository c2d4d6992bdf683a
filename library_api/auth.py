"""
API Key 认证
请求头 Authorization 必须与配置的 api_key 完全一致；未配置 api_key 时不校验。
"""
import logging
from typing import Optional

from fastapi import Header, HTTPException, Request, status

logger = logging.getLogger(__name__)


async def verify_api_key(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Optional[str]:
    """校验API Key，失败时返回401"""
    expected_key = request.app.state.settings.api_key
    if not expected_key:
        return None

    if authorization != expected_key:
        logger.warning(f"无效的API Key访问: {request.method} {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API Key",
        )

    return authorization
