"""Unit tests for credential extraction."""

from adgate.domain.value import (
    ApiKeyCredential,
    PinCredential,
    SessionTokenCredential,
)
from adgate.interface.api.credentials import CredentialFields, extract_credential


class TestExtractCredential:
    """Tests for extract_credential."""

    def test_pin_wins_over_everything(self):
        """The PIN field has highest precedence."""
        fields = CredentialFields(pin="1234", api_key="ak_x", token="tok")

        credential = extract_credential(fields, "Bearer header-token")

        assert credential == PinCredential(pin="1234")

    def test_api_key_before_token(self):
        """An API key wins over a body token."""
        fields = CredentialFields(api_key="ak_x", token="tok")

        assert extract_credential(fields) == ApiKeyCredential(key="ak_x")

    def test_body_token_before_header(self):
        """A body token wins over the Authorization header."""
        fields = CredentialFields(token="body-token")

        credential = extract_credential(fields, "Bearer header-token")

        assert credential == SessionTokenCredential(token="body-token")

    def test_bearer_header(self):
        """The Authorization header is used when the body has no credential."""
        credential = extract_credential(None, "bearer header-token")

        assert credential == SessionTokenCredential(token="header-token")

    def test_blank_fields_are_absent(self):
        """Empty body fields fall through to the header."""
        fields = CredentialFields(pin="", api_key="")

        credential = extract_credential(fields, "Bearer header-token")

        assert credential == SessionTokenCredential(token="header-token")

    def test_nothing_presented(self):
        """No credential anywhere yields None."""
        assert extract_credential(CredentialFields(), None) is None

    def test_non_bearer_header_is_ignored(self):
        """Other authorization schemes are not credentials here."""
        assert extract_credential(None, "Basic dXNlcjpwYXNz") is None

    def test_non_string_pin_yields_nothing(self):
        """A numeric PIN is not a usable credential."""
        assert extract_credential(CredentialFields(pin=1234)) is None

    def test_mistyped_field_does_not_fall_through(self):
        """A mistyped body credential is not replaced by the header."""
        fields = CredentialFields(api_key=["ak_x"])

        assert extract_credential(fields, "Bearer header-token") is None
