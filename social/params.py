"""Parsing of identifiers and limits arriving at the HTTP boundary."""

from django.conf import settings

from social.exceptions import InvalidIdentifier

# largest value a BigAutoField primary key can hold
MAX_ID = 2 ** 63 - 1


def _as_positive_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 < value <= MAX_ID else None
    text = str(value).strip()
    if not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    return number if 0 < number <= MAX_ID else None


def parse_id(value, field="id"):
    """Return a positive int or raise InvalidIdentifier naming the field."""
    number = _as_positive_int(value)
    if number is None:
        raise InvalidIdentifier({field: f"{field} must be a positive integer."})
    return number


def parse_optional_id(value, field="id"):
    """Like parse_id, but None and empty strings mean 'absent'."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_id(value, field)


def sanitize_ids(values):
    """
    Keep positive integer ids from an iterable of mixed values, deduplicated in
    first-seen order. Anything else is dropped silently.
    """
    seen = set()
    result = []
    for value in values or []:
        number = _as_positive_int(value)
        if number is None or number in seen:
            continue
        seen.add(number)
        result.append(number)
    return result


def parse_id_list(raw):
    """Parse "1,2,3" (or a list of such strings) into sanitized ids."""
    if not raw:
        return []
    if isinstance(raw, str):
        raw = [raw]
    tokens = []
    for chunk in raw:
        tokens.extend(str(chunk).split(","))
    return sanitize_ids(tokens)


def clamp_limit(raw, default=None, maximum=None):
    """Clamp a page size into 1..SOCIAL_SEARCH_LIMIT_MAX, falling back to the default."""
    default = default or settings.SOCIAL_SEARCH_LIMIT_DEFAULT
    maximum = maximum or settings.SOCIAL_SEARCH_LIMIT_MAX
    number = _as_positive_int(raw) if raw not in (None, "") else None
    if number is None:
        return default
    return max(1, min(maximum, number))
