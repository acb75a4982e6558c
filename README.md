# fixed8

Signed fixed-point numbers that keep 8 fractional bits, so values are stored
as whole multiples of 1/256. On top of them sits a small geometry helper that
tells whether a point lies inside a triangle.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Fixed-point numbers

```python
from fixed8.fixed import Fixed, smaller, larger

a = Fixed(10)          # from an int: stored as 10 << 8
b = Fixed(42.42)       # from a float: rounded to the nearest 1/256
print(b)               # 42.4219
print(b.to_int())      # 42
print(b.raw)           # 10860

c = Fixed(5.05) * Fixed(2)
print(c)               # 10.1016
print(larger(a, c))    # 10.1016

n = Fixed.from_raw(1)  # smallest positive step, 1/256
```

`Fixed(value)` accepts an `int`, a `float` or another `Fixed` (which is
copied); anything else raises `TypeError`. A float that is NaN or infinite
raises `ValueError`. `Fixed()` is zero.

The `raw` property reads and sets the underlying scaled integer.
`to_float()` and `to_int()` convert back; `to_int()` drops the fractional
bits (rounding towards negative infinity). `str()` prints the value as a
float with six significant digits.

Comparisons work on the stored raw value, and a plain `int` or `float` on the
other side is converted to `Fixed` first. `+`, `-`, `*` and `/` go through
single-precision floating point and round back to the nearest step. Dividing
by zero raises `ZeroDivisionError`. `Fixed` values are mutable and therefore
not hashable.

`increment()` and `decrement()` move a value by one step (1/256) in place and
return it; `post_increment()` and `post_decrement()` do the same but return
a copy of the value from before the change.

`smaller(a, b)` and `larger(a, b)` return one of their arguments; on a tie
they return the second.

`set_debug(True)` makes construction print tracing messages such as
`Int constructor called` to standard output; `set_debug(False)` turns them
off again (the default).

## Point in triangle

```python
from fixed8.point import Point
from fixed8.bsp import bsp

a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)
bsp(a, b, c, Point(1, 1))    # True
bsp(a, b, c, Point(11, 11))  # False
```

A `Point` takes `Fixed`, `int` or `float` coordinates and cannot be changed
afterwards; its `x` and `y` properties return copies. Points compare equal
when both coordinates match, and are hashable.

`bsp` computes the barycentric coordinates of the point in fixed-point
arithmetic and reports whether all three lie between 0 and 1, so points on an
edge count as inside. If the three vertices do not form a triangle it raises
`ValueError`.

## Demo

```
fixed8-demo
```

runs the built-in walkthroughs of raw bits, conversions, arithmetic and the
triangle test, printing their output. Give one of `raw`, `conversion`,
`arithmetic` or `bsp` to run only that one (the default is `all`):

```
fixed8-demo bsp
```

## Limits

Raw values are plain Python integers, so there is no 32-bit overflow or
wrap-around: values grow as large as needed.