import re
from typing import Iterable, Set

_SEPARATORS = re.compile(r"[\s.\-]")


def sanitize_registration(raw: str) -> str:
    """Canonical registration key: whitespace, periods and hyphens removed."""
    return _SEPARATORS.sub("", raw or "").strip()


def canonical_keys(employees: Iterable) -> Set[str]:
    """Sanitized registration keys of already stored employees."""
    return {sanitize_registration(e.registration_number) for e in employees}
