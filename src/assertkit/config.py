"""Runtime configuration for assertion failure handling."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssertionSettings(BaseSettings):
    """Settings read from the environment.

    Loads from environment variables automatically:
        ASSERTKIT_LAUNCH_DEBUGGER_ON_FAILURE, ASSERTKIT_LAUNCH_DEBUGGER_FILTER,
        ASSERTKIT_MAX_VALUE_REPR

    None of these affect whether an assertion passes; they only change what
    happens around a failure and how values are rendered in messages.
    """

    launch_debugger_on_failure: bool = Field(
        default=False, description="Call sys.breakpointhook() when an assertion fails"
    )
    launch_debugger_filter: str | None = Field(
        default=None,
        description="Only launch the debugger when the assertion or caller name contains this text",
    )
    max_value_repr: int = Field(
        default=256, ge=16, description="Maximum length of a rendered value in failure messages"
    )

    model_config = SettingsConfigDict(
        env_prefix="ASSERTKIT_",
        extra="ignore",
    )

    def should_launch_debugger(self, *names: str | None) -> bool:
        """Return True when a failure attributed to ``names`` should break into the debugger."""
        if not self.launch_debugger_on_failure:
            return False
        if not self.launch_debugger_filter:
            return True
        return any(name and self.launch_debugger_filter in name for name in names)


@lru_cache(maxsize=1)
def get_settings() -> AssertionSettings:
    """Return the process-wide settings, reading the environment on first use."""
    return AssertionSettings()


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings()`` re-reads the environment."""
    get_settings.cache_clear()
