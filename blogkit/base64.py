"""Base64 encoding and decoding with the standard alphabet and '=' padding."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="

_DECODE = {char: value for value, char in enumerate(ALPHABET)}

SAMPLE_INPUT = (
    "Man is distinguished, not only by his reason, but by this singular passion from other animals, "
    "which is a lust of the mind, that by a perseverance of delight in the continued and indefatigable "
    "generation of knowledge, exceeds the short vehemence of any carnal pleasure."
)
SAMPLE_REFERENCE = (
    "TWFuIGlzIGRpc3Rpbmd1aXNoZWQsIG5vdCBvbmx5IGJ5IGhpcyByZWFzb24sIGJ1dCBieSB0aGlz"
    "IHNpbmd1bGFyIHBhc3Npb24gZnJvbSBvdGhlciBhbmltYWxzLCB3aGljaCBpcyBhIGx1c3Qgb2Yg"
    "dGhlIG1pbmQsIHRoYXQgYnkgYSBwZXJzZXZlcmFuY2Ugb2YgZGVsaWdodCBpbiB0aGUgY29udGlu"
    "dWVkIGFuZCBpbmRlZmF0aWdhYmxlIGdlbmVyYXRpb24gb2Yga25vd2xlZGdlLCBleGNlZWRzIHRo"
    "ZSBzaG9ydCB2ZWhlbWVuY2Ugb2YgYW55IGNhcm5hbCBwbGVhc3VyZS4="
)


def _sextets(value: int, count: int) -> str:
    """Return the first ``count`` 6-bit characters of a 24-bit group."""
    return "".join(ALPHABET[(value >> shift) & 0x3F] for shift in (18, 12, 6, 0)[:count])


def encode(data) -> str:
    """Encode a bytes-like object to a base64 string."""
    raw = bytes(memoryview(data))
    full = len(raw) - len(raw) % 3
    parts = [
        _sextets(int.from_bytes(raw[start:start + 3], "big"), 4)
        for start in range(0, full, 3)
    ]
    rest = raw[full:]
    if len(rest) == 1:
        parts.append(_sextets(rest[0] << 16, 2) + PAD * 2)
    elif len(rest) == 2:
        parts.append(_sextets(int.from_bytes(rest, "big") << 8, 3) + PAD)
    return "".join(parts)


def decode(text: str) -> bytes:
    """Decode a base64 string; raise ValueError on malformed input."""
    if len(text) % 4:
        raise ValueError("Invalid base64 length!")

    decoded = bytearray()
    for start in range(0, len(text), 4):
        acc = 0
        for offset, char in enumerate(text[start:start + 4]):
            acc <<= 6
            if char == PAD:
                remaining = len(text) - (start + offset)
                if remaining == 1:
                    decoded += bytes(((acc >> 16) & 0xFF, (acc >> 8) & 0xFF))
                    return bytes(decoded)
                if remaining == 2:
                    decoded.append((acc >> 10) & 0xFF)
                    return bytes(decoded)
                raise ValueError("Invalid padding in base64!")
            value = _DECODE.get(char)
            if value is None:
                raise ValueError("Invalid character in base64!")
            acc |= value
        decoded += acc.to_bytes(3, "big")
    return bytes(decoded)


def main(argv: Sequence[str] | None = None) -> int:
    """Encode and decode a sample text, checking both against the reference."""
    parser = argparse.ArgumentParser(description="Base64 self-check on a sample text.")
    parser.parse_args(argv)

    data = SAMPLE_INPUT.encode("ascii")
    try:
        print(f"Input: {SAMPLE_INPUT}\n")
        print(f"Reference: {SAMPLE_REFERENCE}\n")

        encoded = encode(data)
        print(f"Encoded: {encoded}\n")
        if encoded != SAMPLE_REFERENCE:
            raise RuntimeError("Encoded data does not match reference!")
        print("Encoded data matches reference\n")

        decoded = decode(encoded)
        print(f"Decoded: {decoded.decode('ascii', errors='replace')}\n")
        if decoded != data:
            raise RuntimeError("Input data does not match decoded!")
        print("Decoded data matches original\n")
    except (RuntimeError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())