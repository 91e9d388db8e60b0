"""
API 路由分组模块
"""

from .giveaway import giveaway_router

__all__ = [
    "giveaway_router",
]
