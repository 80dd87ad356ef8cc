#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一的 API 错误处理装饰器

- ValueError（含 InvalidInputError）-> 400，detail 为错误信息
- HTTPException 原样抛出
- 其他异常 -> 500，记录堆栈，detail 只含错误摘要
"""

from functools import wraps
import logging

from fastapi import HTTPException

logger = logging.getLogger(__name__)


def api_error_handler(func):
    """把路由函数中的异常映射为 HTTP 状态码"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except ValueError as e:
            logger.info(f"请求参数错误: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"❌ 排盘接口异常: {e}")
            raise HTTPException(status_code=500, detail=f"排盘失败: {e}") from e

    return wrapper
