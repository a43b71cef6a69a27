"""Upload and browse paintings, music and dance videos."""

__version__ = "0.1.0"
