# -*- coding: utf-8 -*-
"""
认证依赖

公开接口：
- `CurrentUser`
- `get_current_user`

文件功能：
- 从上游网关注入的请求头中解析调用方身份。令牌校验由网关负责，
  本服务只信任已认证的用户标识。
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, status
from pydantic import BaseModel


class CurrentUser(BaseModel):
    """当前调用方"""

    id: str


def get_current_user(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> CurrentUser:
    """解析调用方用户标识，缺失时返回 401。"""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="缺少用户身份信息。",
        )
    return CurrentUser(id=user_id)
