"""Interpretation of hierarchical configuration keys as node paths."""


class DefaultExpressionEngine:
    """Splits keys into path segments on a delimiter.

    A doubled delimiter stands for a literal delimiter inside a segment, so
    the node name ``a.b`` is written ``a..b`` in a key.
    """

    def __init__(self, delimiter: str = ".") -> None:
        """Initialize the engine with the delimiter separating segments."""
        if not delimiter:
            msg = "Delimiter must not be empty"
            raise ValueError(msg)
        self.delimiter = delimiter

    def key_segments(self, key: str) -> list[str]:
        """Split a key into the node names along its path."""
        d = self.delimiter
        segments: list[str] = []
        buf: list[str] = []
        i = 0
        while i < len(key):
            if key.startswith(d, i):
                if key.startswith(d, i + len(d)):
                    buf.append(d)
                    i += 2 * len(d)
                    continue
                segments.append("".join(buf))
                buf = []
                i += len(d)
                continue
            buf.append(key[i])
            i += 1
        segments.append("".join(buf))
        return [s for s in segments if s]

    def join(self, segments: list[str]) -> str:
        """Build a key from node names, escaping embedded delimiters."""
        d = self.delimiter
        return d.join(s.replace(d, d + d) for s in segments)

    def __eq__(self, other: object) -> bool:
        """Compare engines by delimiter."""
        if not isinstance(other, DefaultExpressionEngine):
            return NotImplemented
        return self.delimiter == other.delimiter

    def __hash__(self) -> int:
        """Hash the delimiter."""
        return hash(self.delimiter)

    def __repr__(self) -> str:
        """Show the delimiter."""
        return f"DefaultExpressionEngine(delimiter={self.delimiter!r})"
