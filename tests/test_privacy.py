import pytest
from sidekick_text.privacy import (
    AUTH_HINTS, BANK_HINTS, SOCIAL_HOSTS, host_of, is_sensitive_page, is_social_host,
)

def test_tables_are_immutable():
    for table in (SOCIAL_HOSTS, AUTH_HINTS, BANK_HINTS):
        assert isinstance(table, tuple)
    assert "reddit.com" in SOCIAL_HOSTS

def test_host_of():
    assert host_of("https://www.Reddit.com:443/r/python") == "reddit.com"
    assert host_of("") == ""

@pytest.mark.parametrize("url, expected", [
    ("https://www.youtube.com/watch?v=1", True),
    ("https://old.reddit.com/r/python", True),
    ("https://x.com/home", True),
    ("https://box.com/files", False),
    ("https://example.com/", False),
    ("", False),
])
def test_is_social_host(url, expected):
    assert is_social_host(url) is expected

@pytest.mark.parametrize("url", [
    "https://example.com/login",
    "https://shop.example.com/checkout/step1",
    "https://www.paypal.com/",
    "https://mybank.example/",
])
def test_sensitive_urls(url):
    assert is_sensitive_page(url)

def test_plain_page_is_not_sensitive():
    assert not is_sensitive_page("https://example.com/blog/post", "<p>Hello.</p>")
    assert not is_sensitive_page("")

@pytest.mark.parametrize("html", [
    '<form><input type="password" name="pw"></form>',
    '<input autocomplete="one-time-code">',
    '<input autocomplete="cc-number">',
    '<input name="cardholder">',
])
def test_sensitive_inputs(html):
    assert is_sensitive_page("https://example.com/blog", html)
