"""
Logger for the sqprovision framework.
"""

import inspect
import logging
from datetime import datetime

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the sqprovision log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class SqProvisionLogger:
    """
    Logger class
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger("sqprovision")
        self.logger.setLevel(level)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the message as a single-line JSON record at the given level.
        """
        debug_message = debug_message.replace("\n", " ")

        caller_frame = inspect.currentframe().f_back
        caller_file = caller_frame.f_code.co_filename
        caller_line = caller_frame.f_lineno
        caller_name = caller_frame.f_code.co_name

        self.logger.log(
            level=level,
            msg=LogLine(
                time=str(datetime.now()),
                level=logging.getLevelName(level),
                caller_file=caller_file,
                caller_name=caller_name,
                caller_line=caller_line,
                message=debug_message,
            ).json(),
        )

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
