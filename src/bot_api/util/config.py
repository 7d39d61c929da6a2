import os
from typing import Callable

from bot_api.util.singleton import Singleton


class Config(metaclass = Singleton):

    log_level: str
    attach_uri_scheme: str

    def __init__(
        self,
        def_log_level: str = "INFO",
        def_attach_uri_scheme: str = "attach://",
    ):
        self.log_level = self.__env("LOG_LEVEL", lambda: def_log_level).lower()
        self.attach_uri_scheme = self.__env("ATTACH_URI_SCHEME", lambda: def_attach_uri_scheme)

    @staticmethod
    def __env(name: str, default: Callable[[], str]) -> str:
        env_value = os.environ.get(name, "").strip()
        return env_value if env_value else default()


config = Config()
