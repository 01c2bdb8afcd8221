STATEMENT_SEPARATOR = ";"


def split_statements(text: str, separator: str = STATEMENT_SEPARATOR) -> list[str]:
    """
    Split raw query text into self-terminated statements.

    Blank segments are dropped and every kept segment gets exactly one
    trailing separator, so splitting already split text is a no-op.
    """
    return [
        f"{segment}{separator}"
        for segment in text.split(separator)
        if segment.strip()
    ]
