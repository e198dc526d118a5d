from pydantic import BaseModel  # noqa: F401 For reexporting
from pydantic_settings import BaseSettings, SettingsConfigDict


class JmbgSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Pick up the named variables from the environment with the JMBG_
        # prefix stripped
        env_prefix="JMBG_",
        # Nested models can have individual fields set via JMBG_OUTER__INNER
        # https://docs.pydantic.dev/latest/concepts/pydantic_settings/#parsing-environment-variable-values
        env_nested_delimiter="__",
        case_sensitive=False,
        # Settings are read-only once loaded, and hashable
        frozen=True,
    )


class ValidationSettings(JmbgSettings):
    # Whether 11 digit OIBs are accepted by the CLI and HTTP surfaces when the
    # caller doesn't say
    accept_oib: bool = False
