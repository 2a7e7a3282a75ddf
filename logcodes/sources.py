"""Adapters that turn external data into sets of observed log code identifiers."""

import json
import re
from typing import Generator, Iterable, TextIO

DEFAULT_LOG_FIELD = "HumanReadableCode"

# Terraform escapes the quotes inside a log-based metric filter, so the
# backslash is part of the file text.
TERRAFORM_CODE_PATTERN = re.compile(r'jsonPayload.code=\\"(.+?)\\"')


class LogParseError(ValueError):
    """A line on the log stream is not a JSON object."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f"error occurred while parsing line {line_no}: {line!r}. Error: {reason}")


def read_log_records(stream: TextIO) -> Generator[dict, None, None]:
    """Yield one dict per newline-delimited JSON object in ``stream``.

    Blank lines are skipped rather than treated as malformed. Anything else
    that is not a JSON object raises LogParseError.
    """
    for line_no, line in enumerate(stream, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            record = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise LogParseError(line_no, stripped, str(e)) from e
        if not isinstance(record, dict):
            raise LogParseError(line_no, stripped, "expected a JSON object")
        yield record


def lookup_field(record: dict, field: str):
    """Return ``record[field]``, falling back to a case-insensitive key match."""
    if field in record:
        return record[field]
    folded = field.casefold()
    for key, value in record.items():
        if key.casefold() == folded:
            return value
    return None


def observed_from_log_records(records: Iterable[dict], field: str = DEFAULT_LOG_FIELD) -> set[str]:
    """Collect the ``field`` value of every record, matching the key case-insensitively."""
    observed = set()
    for record in records:
        value = lookup_field(record, field)
        if isinstance(value, str):
            observed.add(value)
    return observed


def observed_from_terraform(text: str) -> list[str]:
    """Return every log code referenced by a ``jsonPayload.code`` filter, in order."""
    return TERRAFORM_CODE_PATTERN.findall(text)


def read_terraform_metrics(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return observed_from_terraform(f.read())
