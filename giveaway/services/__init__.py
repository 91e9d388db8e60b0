"""
业务服务模块
"""

from .giveaway import GiveawayService, init_giveaway, get_giveaway_service
from .parser import (
    ParseReport,
    parse_participants,
    parse_report,
    validate_participants,
    find_duplicate_numbers,
    make_participant_id,
)
from . import errors

__all__ = [
    "GiveawayService",
    "init_giveaway",
    "get_giveaway_service",
    "ParseReport",
    "parse_participants",
    "parse_report",
    "validate_participants",
    "find_duplicate_numbers",
    "make_participant_id",
    "errors",
]
