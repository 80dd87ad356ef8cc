#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘模块共享日志工具

排盘核心（tuvi_calculator.py 与 tuvi_core 子模块）统一使用的命名 logger，
输出时捕获 Broken pipe 等异常。
"""

import logging


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger("core.calculators.tuvi_calculator")
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def safe_log(level, message):
    """
    安全的日志输出函数
    未知级别按 info 输出；客户端断开时的 Broken pipe 不向上抛出
    """
    try:
        logger.log(_LEVELS.get(level, logging.INFO), message)
    except (BrokenPipeError, OSError):
        pass
