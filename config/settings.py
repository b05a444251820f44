from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	DATABASE_URL: str = 'sqlite+aiosqlite:///./currency_rates.db'
	DATABASE_ECHO: bool = False
	DATABASE_BUSY_TIMEOUT_MS: int = 5000

	# Rate source
	RATE_SOURCE_URL: str = 'https://api.coindesk.com/v1/bpi/currentprice.json'
	RATE_SOURCE_CONNECT_TIMEOUT_MS: int = 5000
	RATE_SOURCE_READ_TIMEOUT_MS: int = 5000

	# Application
	APP_NAME: str = 'Currency Rates API'
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
