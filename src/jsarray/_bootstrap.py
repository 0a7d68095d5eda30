import logging
import os
from typing import Any

from .config import ArrayConfig, set_config
from .log import logger as current_logger
from .log import set_logger

_ENVIRONMENT = {
    "index_base": "JSARRAY_INDEX_BASE",
    "separator": "JSARRAY_SEPARATOR",
    "indent": "JSARRAY_INDENT",
}


def bootstrap(
    *,
    config: ArrayConfig | None = None,
    logger: logging.Logger | None = None,
) -> ArrayConfig:
    if logger is not None:
        set_logger(logger)

    if config is None:
        config = config_from_environment()
    set_config(config)
    current_logger().debug(f"jsarray configured: {config.model_dump()}")
    return config


def config_from_environment() -> ArrayConfig:
    values: dict[str, Any] = {}
    for field, variable in _ENVIRONMENT.items():
        value = os.getenv(variable)
        if value is not None:
            values[field] = value
    return ArrayConfig(**values)
