"""
Tests for configuration loading and letterhead asset retrieval.
"""

import httpx
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.assets import AssetFetcher
from core.config import FormsConfig, get_config, load_config_from_env, reset_config


class TestConfig:
    def test_defaults(self):
        config = FormsConfig()
        assert config.page_width == pytest.approx(595.28)
        assert config.page_height == pytest.approx(841.89)
        assert config.content_width == pytest.approx(495.28)
        assert config.paginate is True
        assert config.footer_tag == "CPD Arcadia-2021.02.10"
        assert config.address_lines[0] == "Herseltsesteenweg 4, 3200 Aarschot"
        assert Path(config.left_logo).name == "arcadia.png"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FORMS_LEFT_LOGO", "https://example.org/links.png")
        monkeypatch.setenv("FORMS_FOOTER_TAG", "TEST-TAG")
        monkeypatch.setenv("FORMS_PAGINATE", "false")
        monkeypatch.setenv("FORMS_ASSET_TIMEOUT", "2.5")

        config = load_config_from_env()
        assert config.left_logo == "https://example.org/links.png"
        assert config.footer_tag == "TEST-TAG"
        assert config.paginate is False
        assert config.asset_timeout == pytest.approx(2.5)

    def test_global_config_is_cached_until_reset(self, monkeypatch):
        reset_config()
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("FORMS_FOOTER_TAG", "NA-RESET")
        assert get_config().footer_tag == first.footer_tag

        reset_config()
        assert get_config().footer_tag == "NA-RESET"
        reset_config()


class TestAssetFetcher:
    @pytest.mark.asyncio
    async def test_local_path(self, tmp_path):
        path = tmp_path / "logo.png"
        path.write_bytes(b"logo-bytes")

        assert await AssetFetcher().fetch(str(path)) == b"logo-bytes"

    @pytest.mark.asyncio
    async def test_missing_local_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await AssetFetcher().fetch(str(tmp_path / "weg.png"))

    @pytest.mark.asyncio
    async def test_url_is_fetched_over_http(self):
        def handler(request):
            assert request.url.path == "/logo.png"
            return httpx.Response(200, content=b"remote-logo")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            fetcher = AssetFetcher(http_client=client)
            assert await fetcher.fetch("https://assets.example.org/logo.png") == b"remote-logo"

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        def handler(request):
            return httpx.Response(404)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            fetcher = AssetFetcher(http_client=client)
            with pytest.raises(httpx.HTTPStatusError):
                await fetcher.fetch("https://assets.example.org/weg.png")
