"""
Codepoint views over text values.

Every algorithm in the package indexes characters, never bytes of an
encoded string. A TextView converts its input once into a tuple of
integer code points so that length and random access are O(1).
"""


def _to_ords(s):
    """
    Helper to convert a value to a tuple of integer code points.
    'a' -> 97, '\U0001F60A' -> 128522, b'a' -> 97
    """
    if isinstance(s, str):
        return tuple(ord(c) for c in s)
    if isinstance(s, (bytes, bytearray)):
        return tuple(s)
    if isinstance(s, TextView):
        return s.codes
    try:
        return tuple(s)
    except TypeError:
        raise TypeError(f"Cannot build a text view from {type(s).__name__}") from None


class TextView:
    """
    Immutable, read-only view of a sequence of code points.

    The original value is kept so that substrings can be handed back to
    the caller in the type they passed in.
    """

    __slots__ = ("value", "codes")

    def __init__(self, value):
        if isinstance(value, TextView):
            value = value.value
        codes = _to_ords(value)
        if not hasattr(value, "__getitem__"):
            # one-shot iterables cannot be sliced later
            value = codes
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "codes", codes)

    def __setattr__(self, name, val):
        raise AttributeError("TextView is immutable")

    def char_count(self):
        return len(self.codes)

    def nth_char(self, n):
        """Code point at position ``n`` (0-based, no negative wrap)."""
        if n < 0:
            raise IndexError(f"character index {n} out of range")
        return self.codes[n]

    def slice(self, start, end):
        """Substring of the original value between two codepoint offsets."""
        return self.value[start:end]

    def empty(self):
        """An empty value of the same type as the wrapped one."""
        return self.value[:0]

    def __len__(self):
        return len(self.codes)

    def __getitem__(self, n):
        return self.nth_char(n)

    def __iter__(self):
        return iter(self.codes)

    def __eq__(self, other):
        if isinstance(other, TextView):
            return self.codes == other.codes
        return NotImplemented

    def __hash__(self):
        return hash(self.codes)

    def __repr__(self):
        return f"TextView({self.value!r})"


def as_view(value):
    """Wrap ``value`` in a TextView unless it already is one."""
    if isinstance(value, TextView):
        return value
    return TextView(value)


def label(code):
    """Printable form of a code point for matrix headers."""
    try:
        ch = chr(code)
    except (TypeError, ValueError):
        return str(code)
    return ch if ch.isprintable() else repr(ch)[1:-1]
