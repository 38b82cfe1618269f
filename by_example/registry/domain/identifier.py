"""Identifier derivation for registered examples."""

_PREFIX = "test"
_SEPARATOR = "_"


def sanitize(description: str) -> str:
    """Replace every non-alphanumeric character with the separator.

    Each replaced character yields one separator, so ``"a, b"`` becomes
    ``"a__b"``. Unicode letters and digits are kept as they are.
    """
    return "".join(ch if ch.isalnum() else _SEPARATOR for ch in description)


def derive_identifier(description: str, index: int) -> str:
    """Return the stable identifier for the example at ``index`` of a batch.

    >>> derive_identifier("addition", 1)
    'testaddition_1'
    """
    return f"{_PREFIX}{sanitize(description)}{_SEPARATOR}{index}"
