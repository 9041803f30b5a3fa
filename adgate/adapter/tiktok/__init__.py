"""TikTok Ads payment adapter."""

from adgate.adapter.tiktok.client import (
    MockTikTokPaymentClient,
    RealTikTokPaymentClient,
    TikTokPaymentClient,
)

__all__ = [
    "MockTikTokPaymentClient",
    "RealTikTokPaymentClient",
    "TikTokPaymentClient",
]
