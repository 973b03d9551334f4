"""Demonstration and stats CLI commands."""

from __future__ import annotations

import json

from ..codec import decode, encode
from ..exceptions import DecodeError
from ..utils.sizing import EncodingReport, analyze

DEMO_STRINGS = (
    "",
    "A",
    "Hello",
    "Hello, World!",
    "The quick brown fox jumps over the lazy dog",
    "Base122 is more efficient than Base64!",
)


def run_demo() -> bool:
    """Round-trip the sample strings and a binary payload, printing sizes.

    Returns:
        True if every round-trip succeeded
    """
    ok = True
    print("=== Base122 Encoding Demo ===")
    print()

    for i, sample in enumerate(DEMO_STRINGS, 1):
        data = sample.encode("utf-8")
        print(f"Test case {i}: {sample!r}")
        encoded = encode(data)
        print(f"Encoded: {encoded}")

        try:
            decoded = decode(encoded)
        except DecodeError as e:
            print(f"✗ Decode failed: {e}")
            ok = False
        else:
            print(f"Decoded: {decoded.decode('utf-8', errors='replace')!r}")
            if decoded == data:
                print("✓ Round-trip successful")
            else:
                print("✗ Round-trip mismatch")
                ok = False

        report = analyze(data)
        print(
            f"Length comparison - Original: {report.input_bytes}, "
            f"Base64: {report.base64_bytes}, Base122: {report.encoded_bytes} "
            f"({report.savings_vs_base64 * 100:.1f}% smaller)"
        )
        print()

    print("=== Binary Data Test ===")
    binary = bytes(range(100))
    print(f"Binary data: {list(binary[:10])}...")
    encoded = encode(binary)
    print(f"Encoded length: {len(encoded.encode('utf-8'))}")
    try:
        decoded = decode(encoded)
    except DecodeError as e:
        print(f"✗ Binary decode failed: {e}")
        return False

    if decoded == binary:
        print("✓ Binary round-trip successful")
    else:
        print("✗ Binary round-trip failed")
        ok = False
    return ok


def format_report(report: EncodingReport, as_json: bool = False) -> str:
    """Render an EncodingReport for the terminal.

    Args:
        report: Report to render
        as_json: Emit JSON (including derived ratios) instead of a table
    """
    if as_json:
        payload = report.model_dump()
        payload["efficiency"] = round(report.efficiency, 4)
        payload["savings_vs_base64"] = round(report.savings_vs_base64, 4)
        return json.dumps(payload, indent=2)

    lines = [
        f"{'=' * 19} Base122 stats {'=' * 19}",
        f"Input size{'.' * 30}{report.input_bytes} bytes",
        f"Encoded size{'.' * 28}{report.encoded_bytes} bytes / {report.encoded_chars} chars",
        f"Symbols{'.' * 33}{report.symbols}",
        f"Escapes{'.' * 33}{report.escapes}",
        f"Valid bits in final symbol{'.' * 14}{report.final_bits}",
        f"Base64 size{'.' * 29}{report.base64_bytes} bytes",
        f"Efficiency{'.' * 30}{report.efficiency * 100:.1f}%",
        f"Savings vs Base64{'.' * 23}{report.savings_vs_base64 * 100:.1f}%",
    ]
    return "\n".join(lines)
