# -*- coding: utf-8 -*-
"""
DAO 基类

公开接口：
- `BaseDAO`
"""

from sqlalchemy.orm import Session


class BaseDAO:
    """所有 DAO 的基类，持有当前请求的数据库会话。"""

    def __init__(self, db_session: Session) -> None:
        self.db_session = db_session
