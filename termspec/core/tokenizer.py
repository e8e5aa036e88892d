#!/usr/bin/env python3
"""Split a shell line into the tokens of its last command segment."""
import re
from dataclasses import dataclass, field
from typing import List

CMD_DELIMITER = re.compile(r"\|\||&&|;")

_QUOTES = ("'", '"')


@dataclass(frozen=True)
class CommandToken:
    token: str
    complete: bool
    is_option: bool = False
    # Characters typed for the token, quotes and backslashes included.
    raw_length: int = field(default=0, compare=False)


def last_segment(line: str) -> str:
    return CMD_DELIMITER.split(line)[-1]


def _make_token(text: str, quoted: bool, complete: bool, raw_length: int) -> CommandToken:
    return CommandToken(
        token=text,
        complete=complete,
        is_option=not quoted and text.startswith("-"),
        raw_length=raw_length,
    )


def parse_command(line: str) -> List[CommandToken]:
    """
    Tokenize the segment after the last ``||``, ``&&`` or ``;``.

    Every token followed by whitespace is complete; the trailing token (the
    one under the cursor) is not. Quotes group whitespace and are dropped
    from the token text; an unterminated quote leaves the last token open.
    """
    segment = last_segment(line)
    tokens: List[CommandToken] = []

    current: List[str] = []
    in_token = False
    quoted = False
    quote_char = ""
    escaped = False
    start = 0

    for index, char in enumerate(segment):
        if not in_token and not char.isspace():
            start = index

        if escaped:
            current.append(char)
            escaped = False
            continue

        if char == "\\" and quote_char != "'":
            escaped = True
            in_token = True
            continue

        if quote_char:
            if char == quote_char:
                quote_char = ""
            else:
                current.append(char)
            continue

        if char in _QUOTES:
            quote_char = char
            quoted = True
            in_token = True
            continue

        if char.isspace():
            if in_token:
                tokens.append(
                    _make_token("".join(current), quoted, True, index - start)
                )
                current = []
                in_token = False
                quoted = False
            continue

        current.append(char)
        in_token = True

    if in_token:
        tokens.append(
            _make_token("".join(current), quoted, False, len(segment) - start)
        )

    return tokens
