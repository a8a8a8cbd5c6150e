"""Request Validation — pure presence and content-type checks.

Invariants:
    - Functions here are PURE: they return a result, never raise
    - A field is missing when it is absent, None, or falsy ("" / 0 / False)
    - Shell (services) decides which error to raise from a failed result

Design Decisions:
    - Falsy-means-missing mirrors the public contract: is_active=false is rejected
      on create and update, same as an empty title
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a required-field check."""
    missing: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing


def check_required(
    payload: Mapping[str, object], required: Sequence[str],
) -> ValidationResult:
    """Return which of `required` are missing or falsy in `payload`."""
    return ValidationResult(
        missing=tuple(name for name in required if not payload.get(name)),
    )


def is_json_content_type(header: str | None) -> bool:
    """True when the Content-Type media type is application/json.

    Parameters such as charset are ignored; media type comparison is
    case-insensitive.
    """
    if not header:
        return False
    media_type = header.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE
