import json
import re

_DELIMITERS = re.compile(r"[,;]")


def normalize_amenities(value):
    """Return amenities as a list of unique, stripped, non-empty strings.

    Accepts a list (the usual case), a JSON-encoded list, or a string
    delimited by commas or semicolons.
    """
    if not value:
        return []

    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            try:
                return normalize_amenities(json.loads(text))
            except ValueError:
                pass
        items = _DELIMITERS.split(text)
    elif isinstance(value, (list, tuple, set)):
        items = value
    else:
        items = [value]

    result = []
    for item in items:
        if item is None:
            continue
        name = str(item).strip()
        if name and name not in result:
            result.append(name)
    return result
