__all__ = [
    "JSArray",
    "ArrayConfig",
    "bootstrap",
    "config",
    "set_config",
    "describe",
    "from_",
    "is_array",
    "is_js_array",
    "logger",
    "new",
    "of",
    "exceptions",
]
from . import exceptions
from ._bootstrap import bootstrap as bootstrap
from .array import JSArray, from_, is_js_array, new, of
from .config import ArrayConfig, config, set_config
from .log import logger as logger
from .presenters import describe
from .protocols import is_array
