# app/services/greeting.py

import logging
from typing import Protocol

from app.config import DEFAULT_MSG, Settings

logger = logging.getLogger(__name__)


class GreetingProvider(Protocol):
    def say_hello(self) -> str:
        ...


class HelloService:
    """
    Builds the greeting as "Hello " + msg. msg is fixed once constructed.
    """

    def __init__(self, msg: str = DEFAULT_MSG) -> None:
        self._msg = msg

    @classmethod
    def from_settings(cls, settings: Settings) -> "HelloService":
        return cls(msg=settings.msg)

    @property
    def msg(self) -> str:
        return self._msg

    def say_hello(self) -> str:
        logger.debug("Building greeting for msg=%r", self._msg)
        return "Hello " + self._msg
