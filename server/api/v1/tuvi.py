#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘API接口
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from server.api.v1.models.tuvi_base_models import TuviChartRequest, TuviPalacePromptRequest, TuviResponse
from server.config.app_config import get_config
from server.models.tuvi_chart import TuviChartModel
from server.services.tuvi_service import TuviService
from server.utils.api_error_handler import api_error_handler

logger = logging.getLogger(__name__)

router = APIRouter()

# 排盘是 CPU 密集型计算，放到线程池执行
executor = ThreadPoolExecutor(max_workers=get_config().max_workers)


def _calculate(request: TuviChartRequest) -> Dict[str, Any]:
    result = TuviService.calculate_chart(
        request.full_name,
        request.birth_date,
        request.birth_hour,
        request.gender,
        request.calendar_type or "solar",
        request.is_leap_month,
    )
    # 按输出模型校验一次结构
    return TuviChartModel.model_validate(result).model_dump()


async def _run_calculation(request: TuviChartRequest) -> Dict[str, Any]:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, _calculate, request)


@router.post("/tuvi/chart", response_model=TuviResponse, summary="紫微排盘")
@api_error_handler
async def calculate_tuvi_chart(request: TuviChartRequest):
    """
    紫微排盘（带缓存）

    - **full_name**: 姓名（可选）
    - **birth_date**: 出生日期 (YYYY-MM-DD)，阳历或农历
    - **birth_hour**: 时辰口令 (ty/suu/.../hoi)
    - **gender**: 性别 (male/female)
    - **calendar_type**: 历法类型 (solar/lunar)，默认 solar
    - **is_leap_month**: 农历闰月标记

    返回十二宫、星曜、大运、旬空截空、格局与运势分数
    """
    chart = await _run_calculation(request)
    return TuviResponse(success=True, data=chart)


@router.post("/tuvi/analysis-prompt", response_model=TuviResponse, summary="生成命盘总览提示词")
@api_error_handler
async def tuvi_analysis_prompt(request: TuviChartRequest):
    """排盘后生成总览提示词，返回 {chart, prompt}"""
    chart = await _run_calculation(request)
    prompt = TuviService.build_analysis_prompt(chart, full_name=request.full_name)
    return TuviResponse(success=True, data={'chart': chart, 'prompt': prompt})


@router.post("/tuvi/palace-prompt", response_model=TuviResponse, summary="生成单宫详解提示词")
@api_error_handler
async def tuvi_palace_prompt(request: TuviPalacePromptRequest):
    """排盘后生成指定宫位的提示词，宫名不存在返回 404"""
    chart = await _run_calculation(request)
    try:
        prompt = TuviService.build_palace_prompt(chart, request.palace_name, full_name=request.full_name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"宫位不存在: {request.palace_name}")
    return TuviResponse(
        success=True,
        data={'palace_name': request.palace_name, 'prompt': prompt},
    )
