"""Demo server configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings

from .pager import ErrorPager
from .pages import PassThroughPager, StatusPagePager

PAGERS: dict[str, type] = {
    "status": StatusPagePager,
    "passthrough": PassThroughPager,
}


class Settings(BaseSettings):
    """Settings read from ERRORPAGES_* environment variables."""

    HOST: str = "127.0.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # "status", "passthrough" or "none" (no substitution at all)
    PAGER: str = "status"

    class Config:
        env_file = ".env"
        env_prefix = "ERRORPAGES_"
        case_sensitive = True

    def build_pager(self) -> ErrorPager | None:
        """Instantiate the configured pager, or None when disabled."""
        name = self.PAGER.strip().lower()
        if name == "none":
            return None
        try:
            return PAGERS[name]()
        except KeyError:
            raise ValueError(f"Unknown pager {self.PAGER!r}; expected one of {sorted([*PAGERS, 'none'])}") from None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
