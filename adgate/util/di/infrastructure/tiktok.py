"""TikTok infrastructure providers."""

from dishka import Scope, provide

from adgate.adapter.tiktok import RealTikTokPaymentClient, TikTokPaymentClient
from adgate.config import UpstreamSettings
from adgate.util.di.base import ProviderBase


class TikTokProvider(ProviderBase):
    """TikTok component base."""

    __mock_component__ = "tiktok"


class ProdTikTokProvider(TikTokProvider):
    """Production TikTok provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_tiktok_payment_client(
        self, upstream_settings: UpstreamSettings
    ) -> TikTokPaymentClient:
        """Provide TikTok payment client.

        Raises:
            ValueError: If the upstream base URL is not configured
        """
        if not upstream_settings.base_url:
            raise ValueError("Upstream base URL must be configured")

        return RealTikTokPaymentClient(
            base_url=upstream_settings.base_url,
            timeout=upstream_settings.timeout_seconds,
        )
