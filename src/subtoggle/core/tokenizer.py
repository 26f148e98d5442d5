"""Escape-aware field splitting for substitute commands."""

ESCAPE = "\\"


def split(text: str, delimiter: str, maxsplit: int = -1) -> list[str]:
    """
    Split text on an unescaped delimiter.

    A backslash and the character after it are copied into the current
    field as a pair, so escaped delimiters (and escaped backslashes) never
    end a field. The escape is kept, fields hold raw text.

    The last field is always emitted, even when empty:
        split("a/b/", "/")  -> ["a", "b", ""]
        split("", "/")      -> [""]

    Args:
        text: Text to split
        delimiter: Single delimiter character
        maxsplit: Maximum number of splits; the remainder is kept verbatim
            as the last field. Negative means no limit.
    """
    fields: list[str] = []
    current: list[str] = []
    i = 0

    while i < len(text):
        if maxsplit >= 0 and len(fields) == maxsplit:
            current.append(text[i:])
            break

        char = text[i]
        if char == ESCAPE and i + 1 < len(text):
            current.append(text[i : i + 2])
            i += 2
        elif char == delimiter:
            fields.append("".join(current))
            current = []
            i += 1
        else:
            current.append(char)
            i += 1

    fields.append("".join(current))
    return fields
