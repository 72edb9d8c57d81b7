"""Модель HTTP сообщений: URI, потоки, запросы, ответы, фабрики, сжатие."""

from .uri import Uri
from .stream import Stream, MEMORY_STREAM_URI
from .messages import Message, Request, Response
from .factories import StreamFactory, RequestFactory, ResponseFactory
from .compression import Compressor, GzipCompressor

__all__ = [
    "Uri",
    "Stream",
    "MEMORY_STREAM_URI",
    "Message",
    "Request",
    "Response",
    "StreamFactory",
    "RequestFactory",
    "ResponseFactory",
    "Compressor",
    "GzipCompressor",
]
