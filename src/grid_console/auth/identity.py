"""Token identity used when no identity provider is configured."""

from typing import Optional


class NoTokenIdentity:
    """Identity provider that never holds a token."""

    def is_initialized(self) -> bool:
        return False

    def get_token(self) -> Optional[str]:
        return None
