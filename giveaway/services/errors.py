"""
抽奖流程中的业务异常

每个异常都带有一条可直接展示给用户的 Notice, 以及路由层使用的 HTTP 状态码。
"""
from typing import Iterable, List

from giveaway.models.giveaway import Notice


class GiveawayError(Exception):
    """抽奖业务异常基类"""

    status_code = 400
    title = "Error"

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

    @property
    def notice(self) -> Notice:
        return Notice(title=self.title, description=self.description, variant="destructive")


class InvalidFormatError(GiveawayError):
    title = "Invalid Format"

    def __init__(self):
        super().__init__(
            "Please enter participants in the format: number - name (e.g., 1 - John Doe)"
        )


class DuplicateNumbersError(GiveawayError):
    title = "Duplicate Numbers"

    def __init__(self, duplicates: Iterable[int]):
        self.duplicates: List[int] = list(duplicates)
        super().__init__(
            f"Found duplicate participant numbers: {', '.join(str(n) for n in self.duplicates)}"
        )


class NoParticipantsError(GiveawayError):
    status_code = 409
    title = "No Participants"

    def __init__(self):
        super().__init__("Please add participants before drawing a winner")


class DrawInProgressError(GiveawayError):
    status_code = 409
    title = "Draw In Progress"

    def __init__(self):
        super().__init__("A winner is already being drawn, please wait")


class NothingToResetError(GiveawayError):
    status_code = 409
    title = "Nothing To Reset"

    def __init__(self):
        super().__init__("No winners have been drawn yet")


class DrawAbortedError(GiveawayError):
    status_code = 409
    title = "Draw Cancelled"

    def __init__(self):
        super().__init__("The participant list changed before the winner was revealed")
