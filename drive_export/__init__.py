"""
SheetDrive - send tabular documents to Google Drive as Google Spreadsheets.
"""

__version__ = "1.0.0"
