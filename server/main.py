#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FastAPI 应用主入口
"""

import os
import platform
import time
import logging

import psutil
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# 优先加载 .env 文件（必须在读取配置之前）
env_path = os.path.join(project_root, '.env')
if os.path.exists(env_path):
    load_dotenv(env_path, override=True)

# 配置日志（必须在导入路由之前初始化）
logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from server.api.v1.tuvi import router as tuvi_router
from server.config.app_config import get_config
from server.utils.cache_multi_level import get_multi_cache

app = FastAPI(
    title="HiFate Tử Vi API",
    description="紫微斗数排盘与命盘分析API服务",
    version="1.0.0",
)


# 添加请求日志中间件
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录请求日志，包括处理时间"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.3f}s"
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


# 添加CORS中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tuvi_router, prefix="/api/v1", tags=["紫微斗数"])
logger.info(f"✓ 紫微路由已注册（环境: {get_config().env}）")


@app.get("/")
async def root():
    return {
        "message": "HiFate Tử Vi API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """
    健康检查接口
    返回系统资源与缓存状态
    """
    memory = psutil.virtual_memory()
    cpu_percent = psutil.cpu_percent(interval=None)

    health_data = {
        "status": "healthy",
        "timestamp": time.time(),
        "system": {
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "cpu_percent": cpu_percent,
            "memory_percent": memory.percent,
        },
        "cache": {"enabled": get_config().cache.enabled},
    }
    if get_config().cache.enabled:
        health_data["cache"].update(get_multi_cache().stats())

    # 资源使用过高时返回警告状态
    if cpu_percent > 90 or memory.percent > 90:
        health_data["status"] = "warning"
        health_data["message"] = "系统资源使用率较高"

    return health_data


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "server.main:app",
        host="0.0.0.0",
        port=int(os.getenv('PORT', '8001')),
        reload=get_config().debug,
        workers=1
    )
