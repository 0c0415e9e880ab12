from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OCTO_ENDPOINT = "https://octo.peek.com/integrations/octo"
DEFAULT_OCTO_CAPABILITIES = "octo/pricing,octo/pickups,octo/cart"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    octo_endpoint: str = DEFAULT_OCTO_ENDPOINT
    octo_capabilities: str = DEFAULT_OCTO_CAPABILITIES
    jwt_key: str | None = Field(default=None, alias="OCTO_JWT_KEY")
    supplier_timeout_seconds: float = 30.0
    availability_concurrency: int = 3  # fan-out limit towards the supplier
    availability_unit_pricing: bool = True
    availability_key_ttl_seconds: int | None = None
    use_in_memory: bool = False
    log_supplier_events: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
