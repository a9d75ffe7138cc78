"""
Hours/minutes arithmetic for the hours bank and paid days off.

Minutes are the storage unit everywhere. "HH:MM" text only exists at the
edges: form input (parse_time_text, gated by is_valid_time_text) and display
(format_minutes).
"""
import re
from typing import Iterable, Optional

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")
_STRICT_SIGNED = re.compile(r"-?[0-9]{1,2}:[0-9]{2}")
_STRICT_UNSIGNED = re.compile(r"[0-9]{1,2}:[0-9]{2}")


# int() and str() refuse very long digit runs, so those go through in chunks
_CHUNK_DIGITS = 1000


def _digits_to_int(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    chunks = []
    while value >= 10 ** _CHUNK_DIGITS:
        value, chunk = divmod(value, 10 ** _CHUNK_DIGITS)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def _lenient_int(text: str) -> int:
    """Leading integer of `text`, 0 when there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    value = _digits_to_int(match.group(2))
    return -value if match.group(1) == "-" else value


def parse_time_text(text: Optional[str]) -> int:
    """
    Tolerant "HH:MM" parser returning signed minutes. Never raises.

    Without a colon the digits are read positionally:
    "0315" -> 03:15, "315" -> 3:15, "15" -> 0:15, and a single or 5+ digit
    value above 60 is split as HHMM ("12345" -> 123:45).
    Minutes of 60 or more carry into hours.
    """
    if not text:
        return 0

    text = text.strip()
    negative = text.startswith("-")
    clean = re.sub(r"^[+-]", "", text).strip()

    hours = 0
    minutes = 0

    if ":" in clean:
        parts = clean.split(":")
        if len(parts) == 2:
            hours = _lenient_int(parts[0])
            minutes = _lenient_int(parts[1])
    else:
        digits = re.sub(r"\D", "", clean)
        if len(digits) == 4:
            hours, minutes = int(digits[:2]), int(digits[2:])
        elif len(digits) == 3:
            hours, minutes = int(digits[:1]), int(digits[1:])
        elif len(digits) == 2:
            minutes = int(digits)
        elif digits:
            number = _digits_to_int(digits)
            if number > 60:
                hours, minutes = divmod(number, 100)
            else:
                minutes = number

    if minutes >= 60:
        hours += minutes // 60
        minutes = minutes % 60

    total = hours * 60 + minutes
    return -total if negative else total


def format_minutes(minutes: int) -> str:
    """-75 -> "-01:15". Never emits a "+" sign."""
    hours, mins = divmod(abs(minutes), 60)
    sign = "-" if minutes < 0 else ""
    return f"{sign}{_int_to_digits(hours).zfill(2)}:{mins:02d}"


def is_valid_time_text(text: Optional[str], allow_negative: bool = False) -> bool:
    """Strict form gate: H:MM or HH:MM, minutes below 60, "-" only if allowed."""
    if not text:
        return False
    pattern = _STRICT_SIGNED if allow_negative else _STRICT_UNSIGNED
    if not pattern.fullmatch(text):
        return False
    return int(text.lstrip("-").split(":")[1]) < 60


def compute_hours_balance(entries: Iterable) -> int:
    return sum(entry.minutes for entry in entries)


def compute_paid_day_off_balance(initial_minutes: Optional[int], entries_for_year: Iterable) -> int:
    return (initial_minutes or 0) - sum(entry.minutes for entry in entries_for_year)
