from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    storage_backend: str = "local"
    local_storage_root: str = "./data"
    google_service_account_file: str = ""
    drive_retry_attempts: int = 3

    ocr_language: str = "he"
    pdf_engine: str = "pdfplumber"
    tesseract_language: str = "heb"

    properties_file: str = ".docwatch/properties.json"
    input_folder_id: str = ""
    output_folder_name: str = ""
    run_mode: str = ""

    poll_interval_seconds: int = 300
    run_forever: bool = False
