"""UTF-8 encoding and a reference-counted cache of multi-byte characters.

Screen cells hold a single byte. Printable ASCII is stored as is. Anything
else is interned in a small cache, and the cell stores a one-byte reference
to it: a value below 32 or at least 127.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

__all__ = [
    "CACHE_SIZE",
    "FALLBACK_REF",
    "REPLACEMENT",
    "UnicodeCache",
    "is_cache_ref",
    "utf8_encode",
]

log = logging.getLogger(__name__)

CACHE_SIZE = 160
"""Number of cache slots; 160 is the most a one-byte reference can address."""

FALLBACK_REF = ord("?")
"""Reference returned when a character cannot be cached."""

REPLACEMENT = b"\xef\xbf\xbd"
"""UTF-8 encoding of U+FFFD, the replacement character."""

_MAX_CODE_POINT = 0x10FFFF
_SURROGATE_START = 0xD800
_SURROGATE_SHIFT = 0x800


def utf8_encode(code_point: int, surrogate_fix: bool = False) -> bytes:
    """Encode a code point as UTF-8.

    With ``surrogate_fix``, code points from U+D800 upwards are shifted by
    0x800 so that the surrogate block is skipped. Surrogates are otherwise
    encoded like any other code point. Raises ValueError for values outside
    0..0x10FFFF (after the shift); :data:`REPLACEMENT` is the usual stand-in.
    """
    if code_point < 0:
        raise ValueError(f"negative code point: {code_point}")
    if surrogate_fix and code_point >= _SURROGATE_START:
        code_point += _SURROGATE_SHIFT

    if code_point <= 0x7F:
        return bytes((code_point,))
    if code_point <= 0x7FF:
        return bytes((
            0xC0 | ((code_point >> 6) & 0x1F),
            0x80 | (code_point & 0x3F),
        ))
    if code_point <= 0xFFFF:
        return bytes((
            0xE0 | ((code_point >> 12) & 0x0F),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        ))
    if code_point <= _MAX_CODE_POINT:
        return bytes((
            0xF0 | ((code_point >> 18) & 0x07),
            0x80 | ((code_point >> 12) & 0x3F),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        ))
    raise ValueError(f"code point out of range: {code_point:#x}")


def is_cache_ref(ref: int) -> bool:
    """Tell whether a cell byte is a cache reference rather than plain ASCII."""
    return ref < 32 or ref >= 127


def _ref_to_slot(ref: int) -> int:
    return ref - 95 if ref >= 127 else ref


def _slot_to_ref(slot: int) -> int:
    return slot + 95 if slot > 31 else slot


def _key(data: bytes) -> bytes:
    """The stored form of a character: at most 4 bytes, cut at the first NUL."""
    return bytes(data[:4]).split(b"\0", 1)[0]


@dataclass
class _Slot:
    data: bytes = b""
    count: int = 0


class UnicodeCache:
    """Reference-counted store of multi-byte characters."""

    def __init__(self, size: int = CACHE_SIZE) -> None:
        if not 0 < size <= CACHE_SIZE:
            raise ValueError(f"cache size must be 1..{CACHE_SIZE}, got {size}")
        self._slots = [_Slot() for _ in range(size)]

    def clear(self) -> None:
        """Drop all use counts, freeing every slot."""
        log.debug("utf8 cache clear")
        for slot in self._slots:
            slot.count = 0

    def add(self, data: bytes) -> int:
        """Store a character and return its reference.

        ASCII passes straight through. Control characters and a full cache
        give :data:`FALLBACK_REF`. A character already stored has its use
        count raised.
        """
        if not data:
            raise ValueError("empty character")
        first = data[0]
        if first < 32:
            log.warning("utf8 cache bad char %r", bytes(data[:1]))
            return FALLBACK_REF
        if first < 127:
            return first

        key = _key(data)
        for index, slot in enumerate(self._slots):
            if slot.data == key:
                slot.count += 1
                log.debug("utf8 cache use %r @ %d, %d uses", key, index, slot.count)
                return _slot_to_ref(index)
        for index, slot in enumerate(self._slots):
            if slot.count == 0:
                slot.data = key
                slot.count = 1
                log.debug("utf8 cache new %r @ %d", key, index)
                return _slot_to_ref(index)

        log.error("utf8 cache full")
        return FALLBACK_REF

    def _live_slot(self, ref: int, action: str) -> _Slot:
        index = _ref_to_slot(ref)
        if not 0 <= index < len(self._slots):
            raise KeyError(f"invalid cache reference {ref}")
        slot = self._slots[index]
        if slot.count == 0:
            raise KeyError(f"utf8 cache {action} of freed slot {index} (ref {ref})")
        return slot

    def inc(self, ref: int) -> None:
        """Raise the use count of a reference; ASCII is ignored.

        Raises KeyError if the reference points to a freed slot.
        """
        if not is_cache_ref(ref):
            return
        slot = self._live_slot(ref, "inc")
        slot.count += 1

    def retrieve(self, ref: int) -> bytes:
        """Return the bytes of a reference without changing its use count.

        Raises KeyError if the reference points to a freed slot.
        """
        if not is_cache_ref(ref):
            return bytes((ref,))
        return self._live_slot(ref, "retrieve").data

    def remove(self, ref: int) -> None:
        """Drop one use of a reference; ASCII is ignored.

        Raises KeyError if the slot is already free.
        """
        if not is_cache_ref(ref):
            return
        slot = self._live_slot(ref, "remove")
        slot.count -= 1
        log.debug("utf8 cache release %r, %d uses remain", slot.data, slot.count)