"""Credential verification domain service."""

import logfire

from adgate.domain.error import InvalidCredentialError
from adgate.domain.model import Identity
from adgate.domain.value import Credential, CredentialScheme

from .base import Service


class CredentialVerifier:
    """Verifier interface, one implementation per credential scheme.

    Implementations are read-only: verifying never changes stored state.
    """

    scheme: CredentialScheme

    async def verify(self, credential: Credential) -> Identity:
        """Resolve a presented credential to its identity.

        Args:
            credential: Credential of this verifier's scheme

        Returns:
            The authorized identity

        Raises:
            InvalidCredentialError: If the credential is not acceptable
            ConsistencyError: If the credential is bound to a missing identity
        """
        raise NotImplementedError


class CredentialService(Service):
    """Domain service resolving presented credentials to identities.

    Dispatches on the credential's scheme tag to the verifier registered for
    that scheme. Schemes without a verifier are disabled.
    """

    def __init__(self, verifiers: dict[CredentialScheme, CredentialVerifier]) -> None:
        """Initialize credential service.

        Args:
            verifiers: Map of scheme to verifier implementation
        """
        self.verifiers = verifiers

    async def verify(self, credential: Credential | None) -> Identity:
        """Verify a presented credential.

        Args:
            credential: Presented credential, or None if the request carried none

        Returns:
            The authorized identity

        Raises:
            InvalidCredentialError: If missing, disabled or not acceptable
            ConsistencyError: If stored state is corrupt
        """
        if credential is None:
            logfire.info("Credential missing")
            raise InvalidCredentialError("Credential missing")

        with logfire.span(
            "credential_service.verify", scheme=credential.scheme.value
        ):
            verifier = self.verifiers.get(credential.scheme)
            if not verifier:
                logfire.warn(
                    "Credential scheme disabled", scheme=credential.scheme.value
                )
                raise InvalidCredentialError("Credential scheme disabled")

            identity = await verifier.verify(credential)
            logfire.info(
                "Credential verified",
                scheme=credential.scheme.value,
                identity_id=str(identity.id),
            )
            return identity
