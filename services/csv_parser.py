from enum import Enum
from typing import List

QUOTE = '"'
DELIMITER = ','


class _State(Enum):
    UNQUOTED = 0
    QUOTED = 1


def parse_line(line: str) -> List[str]:
    """
    Splits one raw CSV line into trimmed fields.
    - Lines without quotes are split on every comma.
    - Quoted fields keep commas as text; "" inside quotes is one literal quote.
    - An unterminated quote swallows the rest of the line. Never raises.
    """
    if not line:
        return []

    if QUOTE not in line:
        return [piece.strip() for piece in line.split(DELIMITER)]

    fields: List[str] = []
    current: List[str] = []
    state = _State.UNQUOTED
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if state is _State.UNQUOTED:
            if ch == DELIMITER:
                fields.append("".join(current).strip())
                current = []
            elif ch == QUOTE:
                state = _State.QUOTED
            else:
                current.append(ch)
        else:
            if ch == QUOTE:
                if i + 1 < n and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 1
                else:
                    state = _State.UNQUOTED
            else:
                current.append(ch)
        i += 1

    # Whatever is left is the last field, even inside an open quote
    fields.append("".join(current).strip())
    return fields
