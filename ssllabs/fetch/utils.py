import asyncio
import re
from urllib.parse import quote

SSLLABS_ANALYZE_URL = "https://www.ssllabs.com/ssltest/analyze.html?viaform=true&hideResults=on&latest&d="

# Rating badges are rendered as elements with rating_* classes once the report is done
REPORT_READY_MARKER = "rating_"

# Same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

def build_report_url(domain: str, base_url: str = SSLLABS_ANALYZE_URL) -> str:
    """
    Build the SSL Labs analyze URL for a domain.
    Example: 'a b.com' -> '...&latest&d=a%20b.com'
    """
    return base_url + quote(domain, safe=_URI_COMPONENT_SAFE)

def normalize_cell_text(html: str) -> str:
    """
    Turn a table cell's inner markup into plain text.
    Example: '  <b>Rating</b>  ' -> 'Rating'
    """
    if not html:
        return ""
    text = _TAG_RE.sub("", html)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()

def is_report_ready(html: str) -> bool:
    return REPORT_READY_MARKER in html

async def default_sleep(ms: float) -> None:
    await asyncio.sleep(ms / 1000)
