"""Tests for register identity use case."""

import pytest
from pydantic import ValidationError

from adgate.application.usecase.identity import (
    RegisterIdentityRequest,
    RegisterIdentityUseCase,
)
from adgate.domain.service import CredentialService
from adgate.domain.value import ApiKeyCredential, SessionTokenCredential
from tests.di.config import TEST_LINK_LIMIT
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterIdentityUseCase:
    """Tests for RegisterIdentityUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_working_credentials(self, unit_env):
        """Both returned credentials resolve to the new identity."""
        # Arrange
        use_case = await unit_env.get(RegisterIdentityUseCase)
        credential_service = await unit_env.get(CredentialService)

        # Act
        response = await use_case.execute(RegisterIdentityRequest(name=" alice "))

        # Assert
        assert response.name == "alice"
        assert response.link_limit == TEST_LINK_LIMIT
        by_key = await credential_service.verify(
            ApiKeyCredential(key=response.api_key)
        )
        by_token = await credential_service.verify(
            SessionTokenCredential(token=response.token)
        )
        assert str(by_key.id) == response.identity_id
        assert str(by_token.id) == response.identity_id

    def test_blank_name_is_invalid(self):
        """Names must not be blank."""
        with pytest.raises(ValidationError):
            RegisterIdentityRequest(name="   ")
