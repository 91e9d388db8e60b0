"""
参与者名单解析

输入格式为每行一条 "编号 - 姓名", 例如:

    1 - John Doe
    2 - Jane Smith

不符合格式的行会被直接忽略, 只在日志中记录被忽略的行数。
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List

from giveaway.models.participant import Participant
from giveaway.services.errors import DuplicateNumbersError, InvalidFormatError

logger = logging.getLogger(__name__)

LINE_PATTERN = re.compile(r"^([0-9]+)[\s\ufeff]*-[\s\ufeff]*(.+)$")
# 空白按浏览器 trim() 的规则处理, 包括 BOM (U+FEFF)
_WHITESPACE = re.compile(r"[\s\ufeff]+")
_BOM = "\ufeff"


def _trim(value: str) -> str:
    return value.strip().strip(_BOM).strip()


@dataclass
class ParseReport:
    """解析结果: 成功解析的参与者 + 被忽略的非空行数"""
    participants: List[Participant] = field(default_factory=list)
    skipped_lines: int = 0


def make_participant_id(number: int, name: str) -> str:
    """由编号和规范化姓名生成稳定的列表键, 如 (1, "John  Doe") -> "1-john-doe" """
    normalized = _WHITESPACE.sub("-", _trim(name)).lower()
    return f"{number}-{normalized}"


def parse_line(line: str):
    """解析单行, 不匹配时返回 None"""
    match = LINE_PATTERN.match(_trim(line))
    if not match:
        return None

    number_str, name = match.groups()
    try:
        number = int(number_str)
    except ValueError:
        return None

    name = _trim(name)
    if not name:
        return None

    return Participant(number=number, name=name, id=make_participant_id(number, name))


def parse_report(text: str) -> ParseReport:
    report = ParseReport()
    lines = [line for line in _trim(text or "").split("\n") if _trim(line)]

    for line in lines:
        participant = parse_line(line)
        if participant is None:
            report.skipped_lines += 1
            continue
        report.participants.append(participant)

    if report.skipped_lines:
        logger.debug(f"[Parser] Skipped {report.skipped_lines} line(s) not matching 'number - name'")
    return report


def parse_participants(text: str) -> List[Participant]:
    """将多行文本解析为参与者列表, 保持输入顺序"""
    return parse_report(text).participants


def find_duplicate_numbers(participants: List[Participant]) -> List[int]:
    """
    返回出现多次的编号 (去重, 按第一次重复出现的顺序)
    """
    seen = set()
    duplicates: List[int] = []
    for participant in participants:
        if participant.number in seen:
            if participant.number not in duplicates:
                duplicates.append(participant.number)
        else:
            seen.add(participant.number)
    return duplicates


def validate_participants(participants: List[Participant]) -> List[Participant]:
    """
    校验解析结果

    Raises:
        InvalidFormatError: 没有任何一行符合格式
        DuplicateNumbersError: 存在重复编号
    """
    if not participants:
        raise InvalidFormatError()

    duplicates = find_duplicate_numbers(participants)
    if duplicates:
        raise DuplicateNumbersError(duplicates)

    return participants
