"""Non-cryptographic string hashes: 32-bit murmur3 and the short spooky hash."""

from __future__ import annotations

import itertools
import struct
from typing import Union

Data = Union[str, bytes, bytearray, memoryview]

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF
_MAGIC = 0xDEADBEEFDEADBEEF


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _rotl32(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _M32


def _scramble32(w: int) -> int:
    w = (w * 0xCC9E2D51) & _M32
    w = _rotl32(w, 15)
    return (w * 0x1B873593) & _M32


def hash32(seed: int, data: Data) -> int:
    """Return the 32-bit murmur3 hash of ``data`` with the given seed."""
    raw = _as_bytes(data)
    code = seed & _M32
    tail = len(raw) % 4
    body_end = len(raw) - tail
    for (word,) in struct.iter_unpack("<I", raw[:body_end]):
        code ^= _scramble32(word)
        code = _rotl32(code, 13)
        code = (code * 5 + 0xE6546B64) & _M32
    if tail:
        code ^= _scramble32(int.from_bytes(raw[body_end:], "little"))
    code ^= len(raw) & _M32
    code ^= code >> 16
    code = (code * 0x85EBCA6B) & _M32
    code ^= code >> 13
    code = (code * 0xC2B2AE35) & _M32
    code ^= code >> 16
    return code


def _rot64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _M64


# State slots: a=0, b=1, c=2, d=3.
_MIX_STEPS = tuple(
    zip(
        itertools.cycle(((2, 3, 0), (3, 0, 1), (0, 1, 2), (1, 2, 3))),
        (50, 52, 30, 41, 54, 48, 38, 37, 62, 34, 5, 36),
    )
)

_END_STEPS = tuple(
    zip(
        itertools.cycle(((3, 2), (0, 3), (1, 0), (2, 1))),
        (15, 52, 26, 51, 28, 9, 47, 54, 32, 25, 63),
    )
)


def _mix(state: list[int]) -> None:
    for (x, y, z), k in _MIX_STEPS:
        state[x] = (_rot64(state[x], k) + state[y]) & _M64
        state[z] ^= state[x]


def _end(state: list[int]) -> None:
    for (y, x), k in _END_STEPS:
        state[y] ^= state[x]
        state[x] = _rot64(state[x], k)
        state[y] = (state[y] + state[x]) & _M64


def hash160(seed: int, data: Data) -> tuple[int, int, int]:
    """Return two 64-bit words and one 32-bit word of the spooky short hash."""
    raw = _as_bytes(data)
    seed &= _M64
    state = [seed, seed, _MAGIC, _MAGIC]
    length = len(raw)

    pos = 0
    while length - pos >= 32:
        w0, w1, w2, w3 = struct.unpack_from("<4Q", raw, pos)
        state[2] = (state[2] + w0) & _M64
        state[3] = (state[3] + w1) & _M64
        _mix(state)
        state[0] = (state[0] + w2) & _M64
        state[1] = (state[1] + w3) & _M64
        pos += 32
    if length - pos >= 16:
        w0, w1 = struct.unpack_from("<2Q", raw, pos)
        state[2] = (state[2] + w0) & _M64
        state[3] = (state[3] + w1) & _M64
        _mix(state)
        pos += 16

    state[3] = (state[3] + (length << 56)) & _M64
    rest = raw[pos:]
    if len(rest) >= 8:
        state[2] = (state[2] + int.from_bytes(rest[:8], "little")) & _M64
        state[3] = (state[3] + int.from_bytes(rest[8:], "little")) & _M64
    elif rest:
        state[2] = (state[2] + int.from_bytes(rest, "little")) & _M64
    else:
        state[2] = (state[2] + _MAGIC) & _M64
        state[3] = (state[3] + _MAGIC) & _M64

    _end(state)
    return state[0], state[1], state[2] & _M32


def hash128(seed: int, data: Data) -> tuple[int, int]:
    """Return the two 64-bit words of the spooky short hash."""
    a, b, _ = hash160(seed, data)
    return a, b


def hash64(seed: int, data: Data) -> int:
    """Return the first 64-bit word of the spooky short hash."""
    return hash160(seed, data)[0]