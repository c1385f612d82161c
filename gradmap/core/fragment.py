"""Share-link encoding of gradient text.

The gradient text is carried as a `colors` parameter in the URL fragment
('#colors=FF0000%2C0000FF'). Fragments survive hosts that strip or
rewrite query strings; when decoding, the fragment is tried first and the
query string is the fallback.
"""

from urllib.parse import parse_qs, quote, urlsplit

PARAM = 'colors'


def encode_fragment(text: str) -> str:
    """Return '#colors=<percent-encoded text>'."""
    return f'#{PARAM}={quote(text, safe="")}'


def share_url(base: str, text: str) -> str:
    """Attach the colors fragment to base, replacing any existing fragment."""
    return base.split('#', 1)[0] + encode_fragment(text)


def _colors_param(qs: str) -> str | None:
    values = parse_qs(qs, keep_blank_values=False).get(PARAM)
    return values[0] if values else None


def decode_url(url: str) -> str | None:
    """Extract the gradient text from a share URL, a bare fragment, or a query string."""
    parts = urlsplit(url.strip())
    return _colors_param(parts.fragment) or _colors_param(parts.query) or _colors_param(parts.path.lstrip('#?'))
