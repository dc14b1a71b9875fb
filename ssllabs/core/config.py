import os
from ssllabs.fetch.utils import SSLLABS_ANALYZE_URL

class Settings:
    # SSL Labs
    SSLLABS_BASE_URL: str = os.getenv("SSLLABS_BASE_URL", SSLLABS_ANALYZE_URL)

    # Polling
    SSLLABS_MAX_ATTEMPTS: int = int(os.getenv("SSLLABS_MAX_ATTEMPTS", "30"))
    SSLLABS_INITIAL_DELAY_MS: int = int(os.getenv("SSLLABS_INITIAL_DELAY_MS", "5000"))
    SSLLABS_RETRY_DELAY_MS: int = int(os.getenv("SSLLABS_RETRY_DELAY_MS", "4000"))

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # HTTP
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

settings = Settings()
