import datetime as dt
import httpx
from urllib.parse import parse_qs, urlsplit
from ssllabs.core.config import settings
from ssllabs.fetch.base import TransportResponse

async def fetch_report_page(url: str) -> TransportResponse:
    """
    Fetch an SSL Labs page and return its status and body.
    Non-2xx responses are returned as-is; only transport problems raise.
    """
    # Mock mode for testing
    if settings.USE_MOCK:
        return await _mock_fetch_report_page(url)

    try:
        headers = {
            "User-Agent": settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }

        async with httpx.AsyncClient(
            timeout=settings.REQUEST_TIMEOUT,
            headers=headers,
            follow_redirects=True
        ) as client:
            response = await client.get(url)
            return TransportResponse(
                url=url,
                status_code=response.status_code,
                text=response.text,
                fetched_at=_now_iso(),
            )
    except httpx.TimeoutException:
        raise Exception(f"Timeout while fetching {url}")
    except httpx.HTTPError as e:
        raise Exception(f"Failed to fetch {url}: {str(e)}")

def _now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

def _requested_domain(url: str) -> str:
    """Domain from the d= query parameter, or '' if absent"""
    return parse_qs(urlsplit(url).query).get("d", [""])[0]

async def _mock_fetch_report_page(url: str) -> TransportResponse:
    """Mock SSL Labs responses for testing without network requests"""

    domain = _requested_domain(url).lower()

    if "error" in domain:
        raise Exception(f"Failed to fetch {url}: mock connection refused")

    if "pending" in domain:
        html = """
        <html>
        <body>
            <div id="page">
                <div class="reportTitle">SSL Report</div>
                <div id="warningBox">Please wait... Assessment in progress.</div>
            </div>
        </body>
        </html>
        """
    else:
        html = """
        <html>
        <body>
            <div id="page">
                <div class="reportTitle">SSL Report</div>
                <div class="rating_g">A+</div>
                <table class="reportTable">
                    <thead><tr><td class="reportHeader">Summary</td></tr></thead>
                    <tr>
                        <td class="tableLabel">Overall Rating</td>
                        <td class="tableCell"><span class="rating_g">A+</span></td>
                    </tr>
                    <tr>
                        <td class="tableLabel">Certificate</td>
                        <td class="tableCell">  100 <b>points</b> </td>
                    </tr>
                </table>
                <table class='reportTable'>
                    <tr>
                        <td class="tableLabel">TLS 1.3</td>
                        <td class="tableCell">Yes</td>
                    </tr>
                    <tr>
                        <td class="tableLabel">SSL 3</td>
                        <td class="tableCell">No</td>
                    </tr>
                </table>
            </div>
        </body>
        </html>
        """

    return TransportResponse(url=url, status_code=200, text=html, fetched_at=_now_iso())
