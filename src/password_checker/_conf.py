from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .policy import PasswordPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_CHECKER_",
        env_nested_delimiter="__",
        extra="forbid",
        validate_default=False,
    )

    policy: PasswordPolicy = Field(default_factory=PasswordPolicy)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
