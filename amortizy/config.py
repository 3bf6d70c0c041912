from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "AMORTIZY_",
    }

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Bank-day calendar market used when bank_days_only is set
    # (settlement, federal_reserve, nyse)
    bank_calendar: str = "settlement"

    # Display label for the additional fee column
    additional_fee_label: str = "Additional Fee"


settings = Settings()
