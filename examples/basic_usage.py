#!/usr/bin/env python3
"""Basic usage example for base122.

This example demonstrates:
1. Encoding binary data to Base122 text
2. Decoding back to the original bytes
3. How dangerous characters are escaped
4. Handling decode errors
"""

from __future__ import annotations

from base122 import DANGEROUS, DecodeError, analyze, decode, encode, encode_to_bytes


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("base122 Basic Usage Example")
    print("=" * 60)
    print()

    # Encode some text
    print("1. Encoding a message...")
    data = b"Hello, World!"
    text = encode(data)
    print(f"   Input:   {data!r} ({len(data)} bytes)")
    print(f"   Encoded: {text!r} ({len(text.encode('utf-8'))} bytes)")
    print()

    # Decode it again
    print("2. Decoding...")
    decoded = decode(text)
    print(f"   Decoded: {decoded!r}")
    print(f"   Match:   {decoded == data}")
    print()

    # Dangerous characters
    print("3. Dangerous characters...")
    dangerous = bytes(DANGEROUS)
    encoded = encode_to_bytes(dangerous)
    print(f"   Input:   {list(dangerous)}")
    print(f"   Encoded: {encoded.hex(' ')}")
    print(f"   Literal dangerous bytes in output: "
          f"{sum(1 for b in encoded if b < 0x80 and b in DANGEROUS)}")
    print(f"   Round-trip: {decode(encoded) == dangerous}")
    print()

    # Size summary
    print("4. Size summary for 1 KiB of binary data...")
    report = analyze(bytes(i % 256 for i in range(1024)))
    print(f"   Base122: {report.encoded_bytes} bytes ({report.escapes} escapes)")
    print(f"   Base64:  {report.base64_bytes} bytes")
    print(f"   Efficiency: {report.efficiency * 100:.1f}%")
    print()

    # Errors
    print("5. Decoding corrupted input...")
    try:
        decode(encoded[:-1])
    except DecodeError as e:
        print(f"   {type(e).__name__} at byte {e.position}: {e}")
    print()


if __name__ == "__main__":
    main()
