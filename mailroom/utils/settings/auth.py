from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Shared secret of the identity provider that mints session tokens
    JWT_SECRET: str = ""
    JWT_AUDIENCE: str = "authenticated"
