"""Query string parsing.

Produces a flat, decoded ``dict[str, str]``. Repeated keys collapse to
their last occurrence; there are no multi-value semantics here.
"""

from urllib.parse import parse_qsl


def parse_query(raw: str | None) -> dict[str, str]:
    """Parse a raw query string into a flat mapping.

    A leading ``?`` is ignored, ``+`` and percent escapes are decoded,
    and keys without ``=`` map to ``""``. Empty or malformed input
    yields ``{}``; this function never raises::

        parse_query("?q=hello+world&page=2")   -> {"q": "hello world", "page": "2"}
        parse_query("tag=a&tag=b")             -> {"tag": "b"}
        parse_query(None)                      -> {}
    """
    if not raw or not isinstance(raw, str):
        return {}
    raw = raw.removeprefix("?").split("#", 1)[0]
    try:
        pairs = parse_qsl(raw, keep_blank_values=True)
    except (ValueError, UnicodeError):
        return {}
    return {key: value for key, value in pairs if key}
