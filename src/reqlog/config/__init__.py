"""Config – option keys, ConfigProfile port and lenient value parsing."""

from reqlog.config.options import RequestLoggerOption
from reqlog.config.parsing import parse_bool, parse_duration, parse_int
from reqlog.config.profile import ConfigProfile, MappingConfigProfile

__all__ = [
    "ConfigProfile",
    "MappingConfigProfile",
    "RequestLoggerOption",
    "parse_bool",
    "parse_duration",
    "parse_int",
]
