"""Conversions between snake_case, camelCase and PascalCase."""


def to_snake_case(s: str) -> str:
    """Convert ``s`` to snake_case.

    An uppercase letter starts a new word unless it continues a run of
    capitals, so acronyms stay together ("HTTPRequest" -> "http_request").
    """
    out: list[str] = []
    for i, ch in enumerate(s):
        if not ch.isupper():
            out.append(ch)
            continue
        if i > 0:
            prev = s[i - 1]
            nxt = s[i + 1] if i + 1 < len(s) else ""
            if not prev.isupper() or nxt.islower():
                out.append("_")
        out.append(ch.lower())
    return "".join(out)


def to_camel_case(s: str) -> str:
    """Convert a snake_case string to camelCase.

    Underscores are dropped and the character after one is capitalised,
    except at the start of the result.
    """
    out: list[str] = []
    next_upper = False
    for ch in s:
        if ch == "_":
            next_upper = bool(out)
        elif next_upper:
            out.append(ch.upper())
            next_upper = False
        else:
            out.append(ch)
    return "".join(out)


def to_pascal_case(s: str) -> str:
    """Convert a snake_case string to PascalCase."""
    camel = to_camel_case(s)
    return camel[:1].upper() + camel[1:]