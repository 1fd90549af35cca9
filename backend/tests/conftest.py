"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or geocoding provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("GEOCODING_URL", "https://geocoder.test/api/geocoding")
os.environ.setdefault("GEOCODING_API_KEY", "test-geocoding-key")
