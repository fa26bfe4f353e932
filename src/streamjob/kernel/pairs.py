from __future__ import annotations

DEFAULT_SEPARATOR = "\t"


def split(line: str, separator: str = DEFAULT_SEPARATOR, count: int = 1) -> tuple[str, str | None]:
    """Split a streamed line into its key and the remainder.

    The key ends at the ``count``-th occurrence of ``separator``, mirroring the
    ``stream.num.map.output.key.fields`` setting. A line with fewer separators
    is all key and has no value. A trailing newline is not part of the value.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    line = line[:-1] if line.endswith("\n") else line
    parts = line.split(separator, count)
    if len(parts) <= count:
        return line, None
    return separator.join(parts[:count]), parts[count]
