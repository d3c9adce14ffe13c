"""Token authentication collaborator"""

import hashlib
import hmac

from loan_offer_engine.config import settings
from loan_offer_engine.domain.models import AuthSignal


class TokenAuthenticator:
    """Verifies request tokens and derives an opaque caller identity"""

    def __init__(self, secret: str | None = None, min_length: int | None = None):
        self.secret = secret or settings.token_secret
        self.min_length = min_length or settings.token_min_length

    def is_valid_format(self, token: object) -> bool:
        return isinstance(token, str) and len(token) >= self.min_length

    def verify(self, token: object) -> AuthSignal:
        """
        Check a token and return the authentication signal.

        A well-formed token is accepted; the identity is "user_" followed by
        the first 10 hex digits of HMAC-SHA256(secret, token), stable per token.
        """
        if not self.is_valid_format(token):
            return AuthSignal.anonymous()

        digest = hmac.new(self.secret.encode(), token.encode(), hashlib.sha256).hexdigest()
        return AuthSignal(authenticated=True, identity=f"user_{digest[:10]}")
