# espterm

Building blocks for a serial terminal bridge, in plain Python with no
dependencies outside the standard library.

## Contents

- `espterm.utf8`
  - `utf8_encode(code_point, surrogate_fix=False)` returns the UTF-8 bytes of
    a code point. With `surrogate_fix`, code points from U+D800 upwards are
    shifted by 0x800 to step over the surrogate block. Values outside
    0..0x10FFFF (after the shift) raise `ValueError`; `REPLACEMENT` holds the
    encoding of U+FFFD for use as a stand-in.
  - `UnicodeCache` maps multi-byte characters to single-byte references and
    counts the uses of each. `add()` returns a reference (printable ASCII
    passes through unchanged; control characters and a full cache give
    `FALLBACK_REF`, which is `ord("?")`), `inc()` and `remove()` raise and
    lower the use count, `retrieve()` returns the stored bytes, and `clear()`
    frees every slot. Using a reference to a freed slot raises `KeyError`.
    The cache holds at most `CACHE_SIZE` (160) characters.
  - `is_cache_ref(ref)` tells whether a byte is a cache reference (below 32
    or 127 and above) rather than plain ASCII.
- `espterm.ringbuffer`
  - `RingBuffer(capacity)` is a fixed-capacity byte FIFO with `write()`,
    `read(max_len)`, `reset()`, `free_space()` and `len()`. A write that does
    not fit as a whole raises `BufferFullError` and stores nothing.
  - `UART_TX_BUFFER_SIZE` (1000) and `UART_RX_BUFFER_SIZE` (600) are the
    usual transmit and receive capacities.
- `espterm.constants`: the `SgrCode` enum of Select Graphic Rendition codes,
  and the firmware version constants (`FW_VERSION`, `VERSION_STRING`,
  `FIRMWARE_VERSION_NUM` and their parts).
- `espterm.uart`
  - Enums for line settings as register values: `UartPort`, `WordLength`,
    `StopBits`, `Parity`, `BaudRate`, and the `FlowControl` flags.
  - `translate_crlf(data)` drops carriage returns and turns each line feed
    into CR LF.
  - `describe_line_settings(baudrate, parity, stopbits)` gives a one-line
    summary such as `"115200 baud, NONE parity, 1 stopbit(s)"`.

## Example

```python
from espterm.utf8 import UnicodeCache, is_cache_ref, utf8_encode
from espterm.ringbuffer import RingBuffer
from espterm.uart import Parity, StopBits, describe_line_settings, translate_crlf

cache = UnicodeCache()
ref = cache.add(utf8_encode(0x2588))
assert is_cache_ref(ref)
assert cache.retrieve(ref) == "█".encode()
cache.remove(ref)

buf = RingBuffer(16)
buf.write(b"hello")
assert buf.read(3) == b"hel"
assert len(buf) == 2

assert translate_crlf(b"a\r\nb\n") == b"a\r\nb\r\n"
print(describe_line_settings(115200, Parity.NONE, StopBits.ONE))
```

## What it does not do

The package does not open or drive a serial port, parse terminal escape
sequences, or keep a screen. It has no store for system or WiFi settings
and no web interface, and it provides no command to run: it is a library of
the pieces listed above.

## Running the tests

```
pip install .[test]
pytest
```