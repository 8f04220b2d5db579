from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STATLAB_CALCULATORS__",
        env_file=".env",
        extra="ignore",
    )

    default_confidence: float = Field(95.0, ge=80, le=99.9)
    include_r_code: bool = True
    # p-values below this render as "< 0.001"
    p_value_threshold: float = 0.001


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STATLAB_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = "INFO"
    calculators: CalculatorConfig = CalculatorConfig()


settings = Settings()
