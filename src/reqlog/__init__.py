"""
reqlog – request outcome logging for database client drivers.

Import path convention::

    from reqlog.tracker import RequestLogger, SuccessEvent, ErrorEvent
    from reqlog.config import MappingConfigProfile, RequestLoggerOption
    from reqlog.observability.logging import LoggerSink, configure_logging
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
