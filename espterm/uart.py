"""Serial line parameters and the output translation used on the UARTs."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "BaudRate",
    "FlowControl",
    "Parity",
    "StopBits",
    "UART_TIMEOUT_US",
    "UART_TX_EMPTY_THRESH_VAL",
    "UartPort",
    "WordLength",
    "describe_line_settings",
    "translate_crlf",
]

UART_TIMEOUT_US = 5000
"""Default time to wait for room in the transmit FIFO, in microseconds."""

UART_TX_EMPTY_THRESH_VAL = 16


class UartPort(IntEnum):
    """The two serial ports: UART0 for the terminal, UART1 for debug output."""

    UART0 = 0
    UART1 = 1


class WordLength(IntEnum):
    """Data bits per character, as register values."""

    FIVE_BITS = 0x0
    SIX_BITS = 0x1
    SEVEN_BITS = 0x2
    EIGHT_BITS = 0x3


class StopBits(IntEnum):
    """Stop bit settings, as register values."""

    ONE = 0x1
    ONE_HALF = 0x2
    TWO = 0x3


class Parity(IntEnum):
    """Parity settings, as register values."""

    EVEN = 0
    ODD = 1
    NONE = 0x2


class BaudRate(IntEnum):
    """Supported baud rates."""

    B300 = 300
    B600 = 600
    B1200 = 1200
    B2400 = 2400
    B4800 = 4800
    B9600 = 9600
    B19200 = 19200
    B38400 = 38400
    B57600 = 57600
    B74880 = 74880
    B115200 = 115200
    B230400 = 230400
    B460800 = 460800
    B921600 = 921600
    B1843200 = 1843200
    B3686400 = 3686400


class FlowControl(IntFlag):
    """Hardware flow control lines."""

    NONE = 0x0
    RTS = 0x1
    CTS = 0x2
    CTS_RTS = 0x3


def translate_crlf(data: bytes) -> bytes:
    """Drop carriage returns and turn every line feed into CR LF."""
    return bytes(data).replace(b"\r", b"").replace(b"\n", b"\r\n")


def describe_line_settings(baudrate: int, parity: int, stopbits: int) -> str:
    """Summarise serial line settings for the log."""
    if parity == Parity.NONE:
        parity_name = "NONE"
    elif parity == Parity.ODD:
        parity_name = "ODD"
    else:
        parity_name = "EVEN"

    if stopbits == StopBits.ONE:
        stop_name = "1"
    elif stopbits == StopBits.ONE_HALF:
        stop_name = "1.5"
    else:
        stop_name = "2"

    return f"{int(baudrate)} baud, {parity_name} parity, {stop_name} stopbit(s)"