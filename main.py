"""
main.py

Flask backend that sends tabular documents to Google Drive as Google Spreadsheets.

Dependencies:
  - Python packages: Flask, flask-restx, flask-cors, google-api-python-client,
    google-auth, XlsxWriter

Notes:
  - API v1 endpoints available at /api/v1/ with Swagger docs at /api/v1/docs-ui
  - Uses application factory pattern for better testability
"""

import os

from app_factory import create_app

app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_PORT", 8000))
    debug = os.getenv("FLASK_DEBUG", "true").lower() == "true"

    app.run(host=host, port=port, debug=debug)
