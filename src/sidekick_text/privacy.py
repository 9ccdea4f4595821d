from __future__ import annotations
from typing import Optional
from urllib.parse import urlparse
from .extract import make_soup

SOCIAL_HOSTS = (
    "facebook.com", "instagram.com", "tiktok.com", "x.com",
    "twitter.com", "youtube.com", "reddit.com",
)
AUTH_HINTS = (
    "/login", "/signin", "/sign-in", "/auth", "/checkout",
    "/payment", "/pay", "/otp", "/account",
)
BANK_HINTS = (
    "bank", "paypal", "stripe", "razorpay", "paytm",
    "google.com/pay", "phonepe", "netbanking", "upi",
)
SECRET_INPUTS = 'input[type="password"], input[autocomplete="one-time-code"]'
CARD_INPUTS = 'input[autocomplete="cc-number"], input[autocomplete="cc-csc"], input[name*="card"]'

SCROLL_NUDGE = "You've been scrolling a while. 2-minute break?"
PRIVACY_NOTICE = "Privacy shield on. I'm silent here."

def host_of(url: str) -> str:
    host = urlparse(url or "").netloc.lower().split(":")[0]
    return host[4:] if host.startswith("www.") else host

def is_social_host(url: str) -> bool:
    host = host_of(url)
    return any(host == h or host.endswith("." + h) for h in SOCIAL_HOSTS)

def is_sensitive_page(url: str, html: Optional[str] = None) -> bool:
    """Login, payment and banking pages, judged by URL hints or secret/card inputs."""
    lowered = (url or "").lower()
    if any(h in lowered for h in AUTH_HINTS) or any(h in lowered for h in BANK_HINTS):
        return True
    if html:
        soup = make_soup(html)
        if soup.select_one(SECRET_INPUTS) or soup.select_one(CARD_INPUTS):
            return True
    return False
