"""
Google Drive Configuration

Manages Drive API settings and per-request client construction.
Clients are built per request because every request carries the
access token of the user it acts for.
"""

import os
from typing import Optional

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

# MIME type of a native Google Spreadsheet
GOOGLE_SPREADSHEET_MIME_TYPE = "application/vnd.google-apps.spreadsheet"

# MIME type declared for the uploaded workbook
EXCEL_MIME_TYPE = "application/vnd.ms-excel"


class DriveConfig:
    """Drive API configuration read from the environment."""

    def __init__(
        self,
        api_version: Optional[str] = None,
        target_mime_type: Optional[str] = None,
        source_mime_type: Optional[str] = None,
        response_fields: Optional[str] = None,
    ):
        self.api_version = api_version or os.getenv("DRIVE_API_VERSION", "v3")
        self.target_mime_type = target_mime_type or os.getenv(
            "DRIVE_TARGET_MIME_TYPE", GOOGLE_SPREADSHEET_MIME_TYPE
        )
        self.source_mime_type = source_mime_type or os.getenv(
            "DRIVE_SOURCE_MIME_TYPE", EXCEL_MIME_TYPE
        )
        # Only the share link is requested back
        self.response_fields = response_fields or os.getenv(
            "DRIVE_RESPONSE_FIELDS", "webViewLink"
        )


def build_drive_service(access_token: str, config: Optional[DriveConfig] = None):
    """
    Build a Drive API client authorised with a user's access token.

    Uses the discovery document bundled with google-api-python-client,
    so no network request is made here.

    Args:
        access_token: OAuth access token of the requesting user
        config: Drive configuration, uses default if None

    Returns:
        googleapiclient Resource for the Drive API
    """
    if config is None:
        config = DriveConfig()

    credentials = Credentials(token=access_token)
    return build(
        "drive",
        config.api_version,
        credentials=credentials,
        cache_discovery=False,
    )
