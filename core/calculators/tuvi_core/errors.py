#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""紫微排盘输入异常"""


class InvalidInputError(ValueError):
    """
    出生信息无法解析（日期格式、月日越界、性别、历法类型、空时辰）

    继承 ValueError，API 层统一映射为 HTTP 400。
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field
