# -*- coding: utf-8 -*-
from .dependencies import CurrentUser, get_current_user

__all__ = ["CurrentUser", "get_current_user"]
