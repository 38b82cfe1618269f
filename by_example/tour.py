"""Learn Python by example.

A short tour of the language written as documented examples: every sentence
is backed by code that runs and checks itself. Run it with::

    by-example run by_example.tour
"""

from by_example.example.domain.example import this_code
from by_example.registry.domain.registry import Registry

registry = Registry()


def _assign_then_rebind() -> int:
    variable = 5
    variable = 7
    return variable


def _interpolate_name() -> str:
    salute = "World"
    return f"Hello {salute}"


def _interpolate_age() -> str:
    age = 28
    return f"I am {age} years old"


def _describe(optional: str | None) -> str:
    if optional is None:
        return "Variable was None"
    return "Variable had a value"


def _unpack() -> tuple[str, list[str]]:
    first, *rest = "abc"
    return first, rest


def _walrus_match() -> str:
    values = [3, 8, 1]
    if (largest := max(values)) > 5:
        return f"large: {largest}"
    return "small"


# Names and bindings

registry.for_example(
    "In Python, a name is bound with = and needs no type declaration",
    this_code(lambda: "Hello").returns(lambda: "Hello"),
)

registry.for_instance(
    "A name can be rebound to a new value at any time",
    this_code(_assign_then_rebind).returns(lambda: 7),
)

registry.i_e(
    "Identifiers may use Unicode letters",
    this_code(lambda: (π := 3.14159) and round(π, 2)).returns(lambda: 3.14),
)

# Numeric literals

registry.i_e(
    "We can write integers in decimal, binary, octal or hexadecimal",
    this_code(lambda: 17).returns(lambda: 17),
    this_code(lambda: 0b10001).returns(lambda: 17),
    this_code(lambda: 0o21).returns(lambda: 17),
    this_code(lambda: 0x11).returns(lambda: 17),
)

registry.for_instance(
    "Underscores improve the readability of long numbers",
    this_code(lambda: 1_000_000).returns(lambda: 1000000),
)

# Operations

registry.for_example(
    "Python has the usual integer arithmetic operators",
    this_code(lambda: 2 + 2).returns(lambda: 4),
    this_code(lambda: 5 - 8).returns(lambda: -3),
    this_code(lambda: 4 * 6).returns(lambda: 24),
    this_code(lambda: 30 // 5).returns(lambda: 6),
    this_code(lambda: 39 % 7).returns(lambda: 4),
)

registry.for_example(
    "True division always gives a float, floor division rounds down",
    this_code(lambda: 7 / 2).returns(lambda: 3.5),
    this_code(lambda: -7 // 2).returns(lambda: -4),
)

registry.for_instance(
    "Operators are overloaded. + concatenates two strings",
    this_code(lambda: "Hello " + "World").returns(lambda: "Hello World"),
)

registry.i_e(
    "...or adds two numbers",
    this_code(lambda: 5 + 5).returns(lambda: 10),
)

# Strings

registry.for_example(
    "f-strings interpolate expressions into text",
    this_code(_interpolate_name).returns(lambda: "Hello World"),
    this_code(_interpolate_age).returns(lambda: "I am 28 years old"),
)

# None and optional values

registry.for_instance(
    "A value that may be missing is None, and we test for it with `is None`",
    this_code(lambda: _describe(None)).returns(lambda: "Variable was None"),
    this_code(lambda: _describe("some value")).returns(lambda: "Variable had a value"),
)

registry.for_example(
    "The walrus operator binds a name inside an expression",
    this_code(_walrus_match).returns(lambda: "large: 8"),
)

# Collections

registry.for_example(
    "Comprehensions build collections from iterables",
    this_code(lambda: [n * n for n in range(4)]).returns(lambda: [0, 1, 4, 9]),
    this_code(lambda: {n % 3 for n in range(10)}).returns(lambda: {0, 1, 2}),
    this_code(lambda: {k: len(k) for k in ("a", "bb")}).returns(
        lambda: {"a": 1, "bb": 2}
    ),
)

registry.for_instance(
    "Sequences unpack into several names at once",
    this_code(_unpack).returns(lambda: ("a", ["b", "c"])),
)
