"""Static request shaping for the TikTok Ads payment redirect endpoint.

Device and risk metadata are fixed, non-secret values the endpoint expects
from a desktop browser.
"""

from urllib.parse import urlencode

from adgate.domain.value import PaymentRequest

REDIRECT_PATH = "/api/v3/i18n/payment/redirect/"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/132.0.0.0 Safari/537.36"
)

RISK_INFO = {
    "cookie_enabled": True,
    "screen_width": 1920,
    "screen_height": 1080,
    "browser_language": "en-US",
    "browser_platform": "Win32",
    "browser_name": "Mozilla",
    "browser_version": USER_AGENT.removeprefix("Mozilla/"),
    "browser_online": True,
    "timezone_name": "UTC",
    "device_platform": "web",
}


def build_url(base_url: str, request: PaymentRequest) -> str:
    """Build the redirect endpoint URL with its query string."""
    params = {
        "aadvid": request.external_account_id.root,
        "req_src": "bidding",
        "msToken": request.upstream_tokens.mstoken,
    }
    return f"{base_url.rstrip('/')}{REDIRECT_PATH}?{urlencode(params)}"


def build_headers(base_url: str, request: PaymentRequest) -> dict[str, str]:
    """Build browser-like headers carrying the caller's upstream tokens."""
    tokens = request.upstream_tokens
    ads_id = request.external_account_id.root

    cookie = f"csrftoken={tokens.csrftoken}"
    if tokens.cookies:
        cookie = f"{cookie}; {tokens.cookies.strip()}"

    origin = base_url.rstrip("/")
    return {
        "accept": "application/json, text/plain, */*",
        "accept-language": "en-US,en;q=0.9",
        "cache-control": "no-cache",
        "content-type": "application/json",
        "cookie": cookie,
        "origin": origin,
        "pragma": "no-cache",
        "priority": "u=1, i",
        "referer": f"{origin}/i18n/account/payment?{urlencode({'aadvid': ads_id})}",
        "sec-ch-ua": '"Not A(Brand";v="8", "Chromium";v="132", "Google Chrome";v="132"',
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"Windows"',
        "sec-fetch-dest": "empty",
        "sec-fetch-mode": "cors",
        "sec-fetch-site": "same-origin",
        "trace-log-adv-id": ads_id,
        "user-agent": USER_AGENT,
        "x-csrftoken": tokens.csrftoken,
    }


def build_payload(request: PaymentRequest) -> dict:
    """Build the JSON body; the amount always has two decimal places."""
    return {
        "amount": request.formatted_amount,
        "risk_info": dict(RISK_INFO),
        "upay_route": 1,
        "use_sdk": 1,
        "ad_channel": "TTAM_PAYMENT_PAGE",
    }
