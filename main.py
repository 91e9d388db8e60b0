"""
Sorteio Insta - 抽奖服务

主入口：粘贴 "编号 - 姓名" 名单，逐个抽取中奖者
"""
import logging
import uvicorn
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from giveaway.utils.logger import setup_logging

# 加载环境变量 (必须在日志配置前加载，以便读取 LOG_LEVEL_*)
load_dotenv()

# 配置日志
setup_logging()
startup_logger = logging.getLogger("giveaway.startup")

# 1. 读取并校验配置
from giveaway.config import Config
Config.validate()

# 2. 初始化抽奖会话
from giveaway.services.giveaway import init_giveaway
init_giveaway(
    reveal_delay=Config.reveal_delay(),
    seed=Config.random_seed()
)
startup_logger.info("Giveaway session initialized.")


# 3. 定义 lifespan 函数
@asynccontextmanager
async def lifespan(app):
    """应用生命周期管理"""
    await startup_event()
    yield
    await shutdown_event()


async def startup_event():
    """启动时打印访问地址"""
    startup_logger.info(f"API 文档: http://localhost:{Config.APP_PORT}/scalar")
    startup_logger.info(f"OpenAPI JSON: http://localhost:{Config.APP_PORT}/openapi.json")


async def shutdown_event():
    """关闭时清理资源"""
    startup_logger.info("Giveaway service stopped.")


# 4. 创建 FastAPI 应用
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from scalar_fastapi import get_scalar_api_reference

app = FastAPI(
    title=Config.APP_TITLE,
    description="Informe a lista de participantes para o sorteio",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs(request: Request):
    return get_scalar_api_reference(
        openapi_url=str(request.url_for("openapi")),
        title=Config.APP_TITLE,
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 5. 注册路由
from giveaway.api.routers import giveaway_router

app.include_router(giveaway_router)


@app.get("/")
async def root():
    """根路径"""
    return {"message": "Sorteio Insta is running", "version": "1.0.0"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=Config.APP_PORT, reload=True)
