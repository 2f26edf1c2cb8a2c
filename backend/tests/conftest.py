"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real document store
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/")
os.environ.setdefault("MONGO_DB_NAME", "lessons_test")
os.environ.setdefault("LOG_FORMAT", "text")
