from fastapi import APIRouter, HTTPException, status
from ssllabs.core.config import settings
from ssllabs.core.logger import create_logger
from ssllabs.schemas import NO_URL_ERROR, ReportRequest, SslLabsResult
from ssllabs.services import ssllabs_report

router = APIRouter()

@router.post("/ssllabs", response_model=SslLabsResult)
async def ssllabs_analysis(request: ReportRequest):
    """
    Fetch the SSL Labs report for a domain.

    Accepts a domain in `url` and returns either the extracted report tables
    or an error message. Both outcomes are HTTP 200; only a missing domain is
    rejected.
    """
    log = create_logger("SSL Labs Worker")
    log("=== JOB START ===")
    log(f"Request url: {request.url!r}")

    domain = request.url
    if not domain:
        log(f"No domain provided. Returning error: {NO_URL_ERROR}")
        log("=== JOB END ===")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=NO_URL_ERROR
        )

    result = await ssllabs_report.fetch_ssllabs_report(
        domain,
        log=log,
        max_attempts=settings.SSLLABS_MAX_ATTEMPTS,
        initial_delay_ms=settings.SSLLABS_INITIAL_DELAY_MS,
        retry_delay_ms=settings.SSLLABS_RETRY_DELAY_MS,
        base_url=settings.SSLLABS_BASE_URL,
    )

    log(f"Final result: {result.model_dump_json(indent=2)}")
    log("=== JOB END ===")
    return result
