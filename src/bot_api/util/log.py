import sys
import traceback
from typing import Any

from uvicorn.server import logger

from bot_api.util.config import config

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs print everything
    current_level = _LEVELS.get(config.log_level, _LEVELS["info"])
    return _LEVELS.get(level, _LEVELS["info"]) >= current_level


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = [arg for arg in args if isinstance(arg, Exception)]
    parts = []
    for arg in args:
        if isinstance(arg, Exception):
            parts.append(f"! {type(arg).__name__} (see below)")
        elif hasattr(arg, "model_dump"):
            parts.append(f"{type(arg).__name__}: {arg!r}")
        else:
            parts.append(str(arg))

    if len(parts) <= 1:
        return "".join(parts), exceptions
    if exceptions:
        return "\n ├─ ".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _print_locally(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0].upper()}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := exception.__traceback__:
            print("".join(("    " + line.strip()) for line in traceback.format_tb(trace)), file = sys.stderr)


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _print_locally(level, message, exceptions)
        return message

    if _should_log(level):
        match level:
            case "trace" | "debug":
                logger.debug(message)
            case "info":
                logger.info(message)
            case "warning":
                logger.warning(message)
            case "error":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := exception.__traceback__:
            logger.error(f"Details:\n └─ {''.join(traceback.format_tb(trace)).strip()}")
    return message


def t(*args: Any) -> str:
    return _log_message("trace", *_format_args(*args))


def d(*args: Any) -> str:
    return _log_message("debug", *_format_args(*args))


def i(*args: Any) -> str:
    return _log_message("info", *_format_args(*args))


def w(*args: Any) -> str:
    return _log_message("warning", *_format_args(*args))


def e(*args: Any) -> str:
    return _log_message("error", *_format_args(*args))
