from pydantic import BaseModel, Field
from typing import List, Optional, Union

REPORT_NOT_READY_ERROR = "SSL Labs report not ready after multiple attempts."
FETCH_FAILED_ERROR = "Failed to fetch SSL Labs report."
NO_URL_ERROR = "No URL provided."

class ReportRow(BaseModel):
    label: str = Field(description="Label cell text, tags stripped and whitespace collapsed")
    value: str = Field(description="Value cell text, tags stripped and whitespace collapsed")

ReportTable = List[ReportRow]

class SslLabsSuccess(BaseModel):
    url: str = Field(description="Domain exactly as requested")
    report: List[ReportTable] = Field(description="Result tables in document order, possibly empty")

class SslLabsFailure(BaseModel):
    url: str = Field(description="Domain exactly as requested")
    error: str

SslLabsResult = Union[SslLabsSuccess, SslLabsFailure]

class ReportRequest(BaseModel):
    url: Optional[str] = None
