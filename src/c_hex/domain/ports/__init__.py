"""
Ports — контракты внешних коллабораторов доменного слоя.
"""

from .text_sink import NullTextSink, TextSink

__all__ = [
    "TextSink",
    "NullTextSink",
]
