import asyncio
import httpx
import pytest
from unittest.mock import AsyncMock, patch
from ssllabs.core.config import settings
from ssllabs.fetch.scraper import fetch_report_page
from ssllabs.fetch.utils import build_report_url, is_report_ready

class TestFetchReportPage:
    """Unit tests for the httpx transport"""

    def test_returns_status_and_body(self):
        mock_get = AsyncMock(return_value=httpx.Response(200, text="<html>rating_a</html>"))
        with patch("httpx.AsyncClient.get", new=mock_get):
            response = asyncio.run(fetch_report_page("https://ssllabs.test/analyze?d=a.com"))

        mock_get.assert_awaited_once_with("https://ssllabs.test/analyze?d=a.com")
        assert response.url == "https://ssllabs.test/analyze?d=a.com"
        assert response.status_code == 200
        assert response.text == "<html>rating_a</html>"
        assert response.fetched_at.endswith("Z")

    def test_error_status_does_not_raise(self):
        with patch("httpx.AsyncClient.get", new=AsyncMock(return_value=httpx.Response(503, text="busy"))):
            response = asyncio.run(fetch_report_page("https://ssllabs.test/"))

        assert response.status_code == 503
        assert response.text == "busy"

    def test_timeout(self):
        with patch("httpx.AsyncClient.get", new=AsyncMock(side_effect=httpx.ConnectTimeout("slow"))):
            with pytest.raises(Exception, match="Timeout while fetching"):
                asyncio.run(fetch_report_page("https://ssllabs.test/"))

    def test_connection_error(self):
        with patch("httpx.AsyncClient.get", new=AsyncMock(side_effect=httpx.ConnectError("refused"))):
            with pytest.raises(Exception, match="Failed to fetch https://ssllabs.test/: refused"):
                asyncio.run(fetch_report_page("https://ssllabs.test/"))


class TestMockMode:

    @pytest.fixture(autouse=True)
    def mock_mode(self):
        settings.USE_MOCK = True

    def test_ready_page(self):
        response = asyncio.run(fetch_report_page(build_report_url("example.com")))
        assert response.status_code == 200
        assert is_report_ready(response.text)

    def test_pending_page(self):
        response = asyncio.run(fetch_report_page(build_report_url("pending.example.com")))
        assert not is_report_ready(response.text)

    def test_error_page(self):
        with pytest.raises(Exception, match="mock connection refused"):
            asyncio.run(fetch_report_page(build_report_url("error.example.com")))

    def test_page_chosen_by_domain_not_base_url(self):
        base_url = "https://pending-error.test/analyze?viaform=true&latest&d="
        response = asyncio.run(fetch_report_page(build_report_url("example.com", base_url)))
        assert is_report_ready(response.text)

        response = asyncio.run(fetch_report_page(build_report_url("pending.example.com", base_url)))
        assert not is_report_ready(response.text)
