"""Small walkthroughs of the fixed-point type and the triangle test."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, List, Optional, Sequence

from fixed8.bsp import bsp
from fixed8.fixed import Fixed, larger, set_debug
from fixed8.point import Point

_RULE = "------------------------"


def raw_bits_demo() -> List[str]:
    """Set raw bits, copy and assign, then report each value's raw bits."""
    a = Fixed()
    a.raw = 1
    b = Fixed(a)
    c = Fixed()
    c = Fixed(b)
    return [str(value.raw) for value in (a, b, c)]


def conversion_demo() -> List[str]:
    """Build values from ints and floats and show them as floats and ints."""
    values = {
        "a": Fixed(1234.4321),
        "b": Fixed(10),
        "c": Fixed(42.42),
    }
    values["d"] = Fixed(values["b"])

    lines = ["", _RULE]
    lines.extend(f"{name} is {value}" for name, value in values.items())
    lines.append(_RULE)
    lines.append(_RULE)
    lines.extend(
        f"{name} is {value.to_int()} as integer" for name, value in values.items()
    )
    lines.append(_RULE)
    lines.append("")
    return lines


def arithmetic_demo() -> List[str]:
    """Exercise increments, multiplication and the larger-of helper."""
    a = Fixed()
    b = Fixed(5.05) * Fixed(2)

    lines = [str(a)]
    lines.append(str(a.increment()))
    lines.append(str(a))
    lines.append(str(a.post_increment()))
    lines.append(str(a))
    lines.append(str(b))
    lines.append(str(larger(a, b)))
    return lines


def bsp_demo() -> List[str]:
    """Test one point inside and one outside a right triangle."""
    set_debug(False)
    a = Point(0, 0)
    b = Point(10, 0)
    c = Point(0, 10)
    inside_point = Point(1, 1)
    outside_point = Point(11, 11)
    return [
        f"Inside (1): {int(bsp(a, b, c, inside_point))}",
        f"Outside: {int(bsp(a, b, c, outside_point))}",
    ]


_DEMOS: Dict[str, Callable[[], List[str]]] = {
    "raw": raw_bits_demo,
    "conversion": conversion_demo,
    "arithmetic": arithmetic_demo,
    "bsp": bsp_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demo, or all of them, printing their output."""
    parser = argparse.ArgumentParser(
        prog="fixed8", description="Fixed-point number demonstrations."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)

    chosen = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in chosen:
        for line in demo():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())