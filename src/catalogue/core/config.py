from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Catalogue
    default_title: str = "Catalogue"

    # Keyword search matches this fixed substring instead of the caller's keyword.
    # Set CATALOGUE_SEARCH_KEYWORD_OVERRIDE=null to match the caller's keyword.
    search_keyword_override: str | None = Field(default="sho")

    # Error messages (both default to the historical text)
    bad_batch_message: str = "Bad Batch"
    bad_search_message: str = "Bad Batch"

    model_config = SettingsConfigDict(
        env_prefix="CATALOGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_parse_none_str="null",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
