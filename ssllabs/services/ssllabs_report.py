from typing import Awaitable, Callable, Optional
from ssllabs.core.logger import Logger, create_logger
from ssllabs.fetch import scraper
from ssllabs.fetch.base import Transport
from ssllabs.fetch.html_analyzer import extract_report_tables, summarize_tables
from ssllabs.fetch.utils import (
    REPORT_READY_MARKER,
    SSLLABS_ANALYZE_URL,
    build_report_url,
    default_sleep,
    is_report_ready,
)
from ssllabs.schemas import (
    FETCH_FAILED_ERROR,
    REPORT_NOT_READY_ERROR,
    SslLabsFailure,
    SslLabsResult,
    SslLabsSuccess,
)

Sleep = Callable[[float], Awaitable[None]]

async def fetch_ssllabs_report(
    domain: str,
    *,
    transport: Optional[Transport] = None,
    sleep: Optional[Sleep] = None,
    log: Optional[Logger] = None,
    max_attempts: int = 30,
    initial_delay_ms: int = 5000,
    retry_delay_ms: int = 4000,
    base_url: str = SSLLABS_ANALYZE_URL,
) -> SslLabsResult:
    """
    Request the SSL Labs report for a domain and extract its result tables.

    1. Fetch the analyze page once and keep the body
    2. Wait initial_delay_ms for the assessment to run
    3. Check the same body for the ready marker up to max_attempts times
       (at least once), sleeping retry_delay_ms between misses
    4. Ready -> SslLabsSuccess with the extracted tables,
       never ready -> SslLabsFailure(REPORT_NOT_READY_ERROR)

    Never raises: any exception becomes SslLabsFailure(FETCH_FAILED_ERROR).
    """
    # Looked up per call, not bound at import
    transport = transport or scraper.fetch_report_page
    sleep = sleep or default_sleep
    log = _safe_logger(log or create_logger("SSL Labs"))

    try:
        url = build_report_url(domain, base_url)
        log(f"Full SSL Labs URL: {url}")
        log("Making initial request to SSL Labs...")
        response = await transport(url)
        log(f"Initial response status: {response.status_code}")
        log(f"Fetched {response.url} at {response.fetched_at}")

        html = response.text
        if not isinstance(html, str):
            raise TypeError(f"Expected text body, got {type(html).__name__}")
        log(f"HTML response length: {len(html)} characters")

        await sleep(initial_delay_ms)
        log(f"Initial {initial_delay_ms / 1000}s delay completed")

        # The page is not re-fetched: every attempt checks the same snapshot
        limit = max(max_attempts, 1)
        found = False
        attempts = 0

        while not found and attempts < limit:
            log(f"Attempt {attempts + 1}/{limit}: Checking for {REPORT_READY_MARKER} in HTML...")
            if is_report_ready(html):
                found = True
                log(f"Rating found in HTML after {attempts + 1} attempts")
            elif attempts + 1 < limit:
                log(f"SSL Labs report still loading, waiting {retry_delay_ms / 1000}s... (attempt {attempts + 1}/{limit})")
                await sleep(retry_delay_ms)
            attempts += 1

        if not found:
            log(f"TIMEOUT: SSL Labs report not ready after {attempts} attempts")
            return SslLabsFailure(url=domain, error=REPORT_NOT_READY_ERROR)

        log("Processing HTML tables...")
        tables = extract_report_tables(html)
        result = SslLabsSuccess(url=domain, report=tables)
        for index, table in enumerate(tables, start=1):
            log(f"Table {index} processed: {len(table)} rows")
            for row in table:
                log(f'  "{row.label}" = "{row.value}"')

        stats = summarize_tables(tables)
        log(f"SSL Labs analysis complete! Found {stats['tables']} tables with total {stats['rows']} rows")

        return result

    except Exception as e:
        log(f"ERROR fetching SSL Labs report for {domain}: {str(e)}")
        return SslLabsFailure(url=domain, error=FETCH_FAILED_ERROR)

def _safe_logger(log: Logger) -> Logger:
    """Wrap a log sink so a failing write never affects the fetch outcome."""
    def safe_log(message: str) -> None:
        try:
            log(message)
        except Exception:
            pass

    return safe_log
