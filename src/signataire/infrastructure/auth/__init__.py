from signataire.infrastructure.auth.session_auth_provider import SessionAuthProvider

__all__ = ["SessionAuthProvider"]
