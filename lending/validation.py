from datetime import date, datetime

from dateutil.parser import isoparse
from django.utils import timezone

from .exceptions import InvalidArgumentError


def require_positive_int(value, name):
    # bool is an int subclass, but True is not a loan amount
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def as_date(value, name):
    """Coerce a date, datetime or ISO 8601 string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return isoparse(value).date()
        except ValueError as e:
            raise InvalidArgumentError(f"{name} is not a valid date: {value!r}") from e
    raise InvalidArgumentError(f"{name} must be a date, got {value!r}")


def as_aware_datetime(value, name):
    """Coerce a datetime or ISO 8601 string to a timezone-aware datetime."""
    if isinstance(value, str):
        try:
            value = isoparse(value)
        except ValueError as e:
            raise InvalidArgumentError(
                f"{name} is not a valid timestamp: {value!r}"
            ) from e
    if not isinstance(value, datetime):
        raise InvalidArgumentError(f"{name} must be a datetime, got {value!r}")
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value
