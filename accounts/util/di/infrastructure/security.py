"""Security infrastructure providers."""

from dishka import Scope, provide

from accounts.adapter.security import BcryptPasswordEncoder
from accounts.config import SecuritySettings
from accounts.domain.service import PasswordEncoder
from accounts.util.di.base import ProviderBase


class SecurityProvider(ProviderBase):
    """Security component base."""

    __mock_component__ = "security"


class ProdSecurityProvider(SecurityProvider):
    """Production security provider using bcrypt."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_encoder(self, settings: SecuritySettings) -> PasswordEncoder:
        """Provide the bcrypt password encoder with the configured cost."""
        return BcryptPasswordEncoder(rounds=settings.bcrypt_rounds)
