"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from stackit.config import AuthSettings, LeaderboardSettings, ScoringSettings, Settings
from stackit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_scoring_settings(self, settings: Settings) -> ScoringSettings:
        """Provide point values and scoring policy."""
        return settings.scoring

    @provide(scope=Scope.APP)
    def provide_leaderboard_settings(self, settings: Settings) -> LeaderboardSettings:
        """Provide leaderboard limits."""
        return settings.leaderboard
