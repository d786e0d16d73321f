#!/usr/bin/env python
"""Generate the supported charsets RST table from the registry."""

from __future__ import annotations

from chardetect.registry import REGISTRY, CharsetInfo
from chardetect.table import DEFAULT_TABLE

GROUP_DISPLAY = {
    "unicode": "Unicode",
    "multibyte": "Multi-byte",
    "singlebyte": "Single-byte",
}


def group_of(info: CharsetInfo) -> str:
    """Return the :data:`GROUP_DISPLAY` key for *info*."""
    if info.name.startswith("UTF-"):
        return "unicode"
    return "multibyte" if info.is_multibyte else "singlebyte"


def main() -> None:
    """Print the supported charsets RST table to stdout."""
    detected = set(DEFAULT_TABLE.charsets)
    print("Supported Charsets")
    print("==================")
    print()
    print(f"chardetect converts **{len(REGISTRY)} charsets** to UTF-8.")
    print("Charsets marked as detected can also be reported by")
    print(":func:`~chardetect.detect`; the rest are available by name through")
    print(":func:`~chardetect.decode`.")
    print()

    for group, title in GROUP_DISPLAY.items():
        entries = [e for e in REGISTRY if group_of(e) == group]
        print(title)
        print("-" * len(title))
        print()
        print(".. list-table::")
        print("   :header-rows: 1")
        print("   :widths: 20 20 40 10")
        print()
        print("   * - Charset")
        print("     - PostgreSQL")
        print("     - Aliases")
        print("     - Detected")
        for e in entries:
            aliases = ", ".join(e.aliases) if e.aliases else "\u2014"
            host = e.host_name or "\u2014"
            print(f"   * - {e.name}")
            print(f"     - {host}")
            print(f"     - {aliases}")
            print(f"     - {'Yes' if e.name in detected else 'No'}")
        print()


if __name__ == "__main__":
    main()
