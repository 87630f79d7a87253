"""
Test suite for PixelStretch package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for each stage of the stretch pipeline
- Integration tests for complete image workflows (files in, files out)

Run with: pytest
"""
