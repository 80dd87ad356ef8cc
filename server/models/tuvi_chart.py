#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微命盘数据模型 - 统一的命盘输出结构定义（用于 OpenAPI 文档与响应校验）
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class StarModel(BaseModel):
    """星曜数据模型"""
    name: str = Field(..., description="越南文星名", example="Tử Vi")
    name_chinese: str = Field("", description="中文星名", example="紫微")
    type: str = Field(..., description="main(主星) 或 secondary(辅星)", example="main")
    nature: str = Field(..., description="吉凶：good / bad / neutral", example="good")
    brightness: Optional[str] = Field(None, description="庙旺等级：M/V/Đ/B/H", example="M")
    element: Optional[str] = Field(None, description="五行（仅主星）", example="Thổ")


class PalaceModel(BaseModel):
    """宫位数据模型"""
    name: str = Field(..., description="越南文宫名", example="Mệnh")
    name_chinese: str = Field(..., description="中文宫名", example="命宮")
    position: int = Field(..., description="地支下标（Tý=0 ... Hợi=11）", example=2)
    branch: str = Field(..., description="地支", example="Dần")
    main_stars: List[StarModel] = Field(default_factory=list, description="主星列表")
    secondary_stars: List[StarModel] = Field(default_factory=list, description="辅星列表（按安星顺序）")
    element: str = Field(..., description="宫位五行", example="Mộc")
    dai_van: int = Field(..., description="大运起岁", example=6)
    tuan: bool = Field(False, description="是否落旬空")
    triet: bool = Field(False, description="是否落截空")


class TuviChartModel(BaseModel):
    """紫微命盘数据模型"""
    palaces: List[PalaceModel] = Field(..., description="十二宫（从命宫起）")
    heavenly_stem: str = Field(..., description="年干", example="Giáp")
    earthly_branch: str = Field(..., description="年支", example="Tý")
    element: str = Field(..., description="纳音五行", example="Kim")
    nap_am: str = Field(..., description="纳音全名", example="Hải Trung Kim")
    lunar_date: Dict[str, Any] = Field(..., description="排盘用农历日期")
    cuc: Dict[str, Any] = Field(..., description="五行局", example={"element": "Hỏa", "value": 6, "name": "Hỏa Lục Cục"})
    cuc_loai: str = Field(..., description="五行局名称", example="Hỏa Lục Cục")
    menh_position: int = Field(..., description="命宫地支下标", example=2)
    chu_menh: str = Field(..., description="命主", example="Tham Lang")
    chu_than: str = Field(..., description="身主", example="Linh Tinh")
    major_star_group: Dict[str, str] = Field(..., description="主星格局")
    destiny_scores: Dict[str, int] = Field(..., description="四项运势分数")
    tuan_positions: List[int] = Field(..., description="旬空所在地支下标", example=[10, 11])
    triet_positions: List[int] = Field(..., description="截空所在地支下标", example=[8, 9])
    center_info: Dict[str, Any] = Field(default_factory=dict, description="盘心信息")
    destiny_interpretation: Optional[str] = Field(None, description="分数解读")
    conversion_info: Optional[Dict[str, Any]] = Field(None, description="历法转换信息")
