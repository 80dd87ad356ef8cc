#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微请求 / 响应模型 - 包含所有公共字段和验证器
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_DATE_SHAPE = re.compile(r'^\s*\d{4}-\d{1,2}-\d{1,2}\s*$')


class TuviChartRequest(BaseModel):
    """紫微排盘请求模型"""
    full_name: Optional[str] = Field("", description="姓名（仅用于展示，不影响排盘）", example="Nguyễn Văn A")
    birth_date: str = Field(..., description="出生日期，格式：YYYY-MM-DD（calendar_type=lunar 时为农历年月日）", example="1984-01-01")
    birth_hour: str = Field(..., description="出生时辰口令：ty/suu/dan/mao/thin/ti/ngo/mui/than/dau/tuat/hoi", example="ty")
    gender: str = Field(..., description="性别：male(男) 或 female(女)", example="male")
    calendar_type: Optional[str] = Field("solar", description="历法类型：solar(阳历) 或 lunar(农历)，默认solar", example="lunar")
    is_leap_month: Optional[bool] = Field(False, description="农历闰月标记（仅 calendar_type=lunar 时有效）", example=False)

    @field_validator('birth_date')
    @classmethod
    def validate_date(cls, v):
        """只检查形状，日期是否存在由 TuviInputProcessor 按历法校验"""
        if not v or not _DATE_SHAPE.match(v):
            raise ValueError('日期格式错误，应为 YYYY-MM-DD')
        return v.strip()

    @field_validator('birth_hour')
    @classmethod
    def validate_hour(cls, v):
        if not v or not v.strip():
            raise ValueError('出生时辰不能为空')
        return v.strip()

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        """验证性别"""
        if v not in ['male', 'female']:
            raise ValueError('性别必须为 male 或 female')
        return v

    @field_validator('calendar_type')
    @classmethod
    def validate_calendar_type(cls, v):
        """验证历法类型"""
        if v and v not in ['solar', 'lunar']:
            raise ValueError('历法类型必须为 solar 或 lunar')
        return v or "solar"


class TuviPalacePromptRequest(TuviChartRequest):
    """单宫提示词请求模型"""
    palace_name: str = Field(..., description="越南文宫名", example="Quan Lộc")


class TuviResponse(BaseModel):
    """紫微接口统一响应模型"""
    success: bool
    data: Optional[dict] = None
    message: Optional[str] = None
