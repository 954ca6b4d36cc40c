"""Run-length stream decoding (RunLengthDecode)."""

_END_OF_DATA = 128


def run_length_decode(data: bytes) -> bytes:
    """Decode PackBits-style runs, stopping at 128 or at a truncated run."""
    out = bytearray()
    pos = 0
    while pos < len(data):
        length = data[pos]
        pos += 1
        if length == _END_OF_DATA:
            break
        if length < _END_OF_DATA:
            count = length + 1
            if pos + count > len(data):
                break
            out.extend(data[pos : pos + count])
            pos += count
        else:
            if pos >= len(data):
                break
            out.extend(bytes([data[pos]]) * (257 - length))
            pos += 1
    return bytes(out)