"""Serial terminal bridge core: UTF-8 glyph cache, ring buffers, UART settings and SGR codes."""

__version__ = "2.4.0"

__all__ = ["constants", "ringbuffer", "uart", "utf8"]