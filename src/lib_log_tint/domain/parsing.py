"""Tokenizer and parser for loosely structured ``key=value`` log lines.

Parsing never fails: malformed input degrades to a record holding whatever
pairs could be recovered.
"""

from __future__ import annotations

from .records import LogRecord, RecordField


def tokenize(line: str) -> list[str]:
    """Split ``line`` on spaces outside double-quoted regions.

    Tokens keep their quote characters and escape sequences; unquoting is the
    caller's business. An unterminated quote runs to the end of the line.

    Examples
    --------
    >>> tokenize('a=1 b="x y" c=3')
    ['a=1', 'b="x y"', 'c=3']
    >>> tokenize('k="abc')
    ['k="abc']
    >>> tokenize('   ')
    []
    """

    tokens: list[str] = []
    start = -1
    in_quotes = False
    escaped = False
    for index, char in enumerate(line):
        if start == -1:
            if char == " ":
                continue
            start = index
        if in_quotes:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
            continue
        if char == '"':
            in_quotes = True
        elif char == " ":
            tokens.append(line[start:index])
            start = -1
    if start != -1:
        tokens.append(line[start:])
    return tokens


def parse_text_log_line(line: str) -> LogRecord:
    """Convert ``line`` into a :class:`LogRecord`.

    The first ``time``, ``level`` and ``msg`` tokens fill the record scalars;
    repeats of those keys and every other key become ordinary fields.

    Examples
    --------
    >>> record = parse_text_log_line('time=12:00 level="INFO" msg=hi addr=[::]:19132 =skip bare')
    >>> record.time, record.level, record.message
    ('12:00', 'INFO', 'hi')
    >>> [(item.key, item.value) for item in record.fields]
    [('addr', '[::]:19132')]
    """

    record = LogRecord(raw=line)
    seen_time = seen_level = seen_message = False
    for token in tokenize(line):
        key, separator, value = token.partition("=")
        if not separator or not key:
            continue
        if key == "time" and not seen_time:
            record.time = value
            seen_time = True
        elif key == "level" and not seen_level:
            record.level = value.strip('"')
            seen_level = True
        elif key == "msg" and not seen_message:
            record.message = value
            seen_message = True
        else:
            record.fields.append(RecordField(key=key, value=value))
    return record


__all__ = ["parse_text_log_line", "tokenize"]
