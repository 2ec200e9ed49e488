"""
Tests package for the SheetDrive backend.

This package contains test suites organized by type:
- unit/: Unit tests with mocked collaborators
- integration/: Full application wiring with the Drive client patched
"""
