from .static_credential_authenticator import StaticCredentialAuthenticator

__all__ = ["StaticCredentialAuthenticator"]
