from jobs_api.services.credentials import (
    CredentialService,
    JWTCredentialService,
    TokenClaims,
    get_credential_service,
)

__all__ = [
    "CredentialService",
    "JWTCredentialService",
    "TokenClaims",
    "get_credential_service",
]
