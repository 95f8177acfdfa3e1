# pnutil/quote

import logging
import sys

from pnutil import codes
from pnutil.string import String

__all__ = ["quote_data", "quote", "quote_bytes", "fprint_data", "print_data"]

_logger = logging.getLogger(__name__)

_hexdig = b'0123456789abcdef'


def quote_data(dst, src):
    capacity = len(dst)
    idx = 0
    for b in memoryview(src).cast('B'):
        if 32 <= b <= 126: # isprint() in the C locale
            if idx < capacity - 1:
                dst[idx] = b
                idx += 1
                continue
        elif idx < capacity - 4:
            dst[idx+0] = 92 # backslash
            dst[idx+1] = 120 # x
            dst[idx+2] = _hexdig[(b >> 4) & 0xF]
            dst[idx+3] = _hexdig[(b >> 0) & 0xF]
            idx += 4
            continue
        # No room: terminate what was written so far without splitting an escape
        if idx > 0:
            dst[idx-1] = 0
        raise codes.Overflow("%d bytes do not fit in %d" % (len(src), capacity))
    if capacity < 1:
        raise codes.Overflow("no room for terminator")
    dst[idx] = 0
    return idx


def quote(dst, src, tracer=None):
    if tracer is not None:
        tracer.entry("quote")
        tracer.data("size", len(src))
    while True:
        base = dst.size()
        with dst.tail() as tail:
            capacity = len(tail)
            try:
                n = quote_data(tail, src)
            except codes.Overflow:
                n = None
        if n is not None:
            break
        # The tail view is released above, so the buffer may be reallocated
        total = base + capacity
        target = max(16, 2 * total)
        _logger.debug("quote: growing buffer from %d to %d bytes", total, target)
        dst.grow(target)
    dst.resize(base + n)
    if tracer is not None:
        tracer.exit("quote", n)


def quote_bytes(src): # extension
    res = String()
    quote(res, src)
    return res.getvalue().decode('ascii')


def _text(buf):
    end = buf.find(0)
    if end == -1:
        end = len(buf)
    return buf[:end].decode('ascii')


def fprint_data(stream, src):
    buf = bytearray(256)
    try:
        quote_data(buf, src)
    except codes.Overflow:
        stream.write(_text(buf))
        stream.write("... (truncated)")
    except codes.Error as e:
        _logger.error("quote_data: %s", codes.code(e.code))
    else:
        stream.write(_text(buf))


def print_data(src):
    fprint_data(sys.stdout, src)
