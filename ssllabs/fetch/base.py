from dataclasses import dataclass
from typing import Awaitable, Callable

@dataclass
class TransportResponse:
    url: str
    status_code: int
    text: str
    fetched_at: str  # ISO 8601

# Anything that can GET a URL and hand back the status and full body
Transport = Callable[[str], Awaitable[TransportResponse]]
