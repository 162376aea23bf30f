from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    project_name: str = "TOC Middleware - LOU EDW DEV"
    env: str = "dev"

    query_service_url: str = "http://localhost:11000/query"
    query_timeout: float = 30.0  # seconds

    # Result display
    display_timezone: str = "America/Chicago"
    source_timezone: str = "UTC"  # applied to timestamps without an offset
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    timestamp_fields: str = "OrderIssueDate,RequestedShipByDate"  # comma-separated
    missing_sentinel: str = "N/A"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    def timestamp_field_list(self) -> List[str]:
        return [f.strip() for f in self.timestamp_fields.split(",") if f.strip()]

settings = Settings()
