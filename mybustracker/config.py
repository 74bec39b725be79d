"""Client configuration management."""

import os

from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory if available
load_dotenv()

APP_NAME = "mybustracker"
APP_VERSION = "0.1.0"

DEFAULT_BASE_URL = "http://ws.mybustracker.co.uk/?module=json"


class Settings:
    """Client settings loaded from environment variables."""

    # My Bus Tracker web service
    api_key: str = os.getenv("MYBUSTRACKER_API_KEY", "")  # Request a key at http://www.mybustracker.co.uk/?page=API%20Key
    base_url: str = os.getenv("MYBUSTRACKER_BASE_URL", DEFAULT_BASE_URL)

    # Transport
    timeout_seconds: float = float(os.getenv("MYBUSTRACKER_TIMEOUT", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "json")

    @property
    def user_agent(self) -> str:
        """User-Agent header sent with every request."""
        return f"{APP_NAME}/{APP_VERSION}"

    @property
    def has_api_key(self) -> bool:
        """Check if a developer API key is configured."""
        return bool(self.api_key.strip())


# Global settings instance
settings = Settings()
