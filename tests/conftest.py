import pytest

from news_digest import DigestConfig


@pytest.fixture
def config() -> DigestConfig:
    return DigestConfig(
        gnews_api_key="gnews-key",
        hf_api_key="hf-key",
        feed_urls=["https://feeds.test/one.xml", "https://feeds.test/two.xml"],
        digest_size=3,
    )
