"""
Infrastructure — адаптеры портов доменного слоя.
"""

from .logging_sink import LoggingTextSink, get_logger, setup_logging

__all__ = [
    "LoggingTextSink",
    "get_logger",
    "setup_logging",
]
