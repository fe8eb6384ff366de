"""Entity escaping for the three characters reserved by mrkdwn"""

_ESCAPES = str.maketrans({
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
})


def escape(text: str) -> str:
    """Replace &, < and > with entities; every other character passes through."""
    return text.translate(_ESCAPES)
