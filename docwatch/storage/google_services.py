from dataclasses import dataclass
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build

from docwatch.config.settings import Settings
from docwatch.logging.logger import Log

SCOPES = (
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/spreadsheets",
)


@dataclass(frozen=True)
class GoogleServices:
    """Drive v3 and Sheets v4 resources built from one set of credentials."""

    drive: Any
    sheets: Any


def build_google_services(settings: Settings) -> GoogleServices:
    """Authenticate with the service-account key file and build API clients."""
    if not settings.google_service_account_file:
        raise ValueError("google_service_account_file is required for storage_backend=drive")
    credentials = service_account.Credentials.from_service_account_file(  # type: ignore[no-untyped-call]
        settings.google_service_account_file,
        scopes=list(SCOPES),
    )
    drive = build("drive", "v3", credentials=credentials, cache_discovery=False)
    sheets = build("sheets", "v4", credentials=credentials, cache_discovery=False)
    Log.info("Connected to Google Drive and Sheets APIs")
    return GoogleServices(drive=drive, sheets=sheets)


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside a single-quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")
