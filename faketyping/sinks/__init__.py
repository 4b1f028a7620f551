from .base import Sink
from .buffer import BufferSink
from .page import PageSink

__all__ = ["Sink", "BufferSink", "PageSink"]
