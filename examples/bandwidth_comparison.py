#!/usr/bin/env python3
"""Compare encoded sizes: Base122 vs base64 vs hex.

This script encodes a handful of payloads (text, random binary, all-zero,
and dangerous-heavy data) and prints the size of each encoding.
"""

import base64
import os

from base122 import analyze, decode, encode

PAYLOADS = {
    "Short text": b"Hello, World!",
    "Sentence": b"The quick brown fox jumps over the lazy dog",
    "Random 1 KiB": os.urandom(1024),
    "All zeros 1 KiB": b"\x00" * 1024,
    "Dangerous only": bytes([0, 10, 13, 34, 38, 92]) * 100,
    "Byte ramp": bytes(range(256)) * 4,
}


def compare(name, data):
    """Print one comparison row."""
    report = analyze(data)
    b64 = len(base64.b64encode(data))
    hex_size = len(data) * 2
    assert decode(encode(data)) == data

    print(
        f"{name:<18} {report.input_bytes:>7} {report.encoded_bytes:>8} "
        f"{b64:>7} {hex_size:>7} {report.escapes:>8} {report.efficiency * 100:>7.1f}%"
    )


def main():
    """Run the comparison."""
    print("=" * 80)
    print("Base122 size comparison")
    print("=" * 80)
    print(
        f"{'Payload':<18} {'Input':>7} {'Base122':>8} {'Base64':>7} {'Hex':>7} "
        f"{'Escapes':>8} {'Effic.':>8}"
    )
    print("-" * 80)

    for name, data in PAYLOADS.items():
        compare(name, data)

    print()
    print("Efficiency = input bytes / Base122 bytes (ceiling 87.5%).")
    print("Escapes cost no extra space except a dangerous final symbol (+1 byte).")


if __name__ == "__main__":
    main()
