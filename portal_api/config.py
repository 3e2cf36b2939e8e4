"""
API configuration and settings management.
"""
import os


class Config:
    """Application configuration."""

    # Snapshots: JSON files named properties.json / jobs.json / marketplace.json.
    # Empty means the bundled sample data is served.
    DATA_DIR: str = os.getenv("PORTAL_DATA_DIR", "")

    # API settings
    API_TITLE: str = "Portal Listings API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Faceted search over property, job and marketplace listings"

    # CORS settings
    CORS_ORIGINS: list = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: list = ["*"]
    CORS_ALLOW_HEADERS: list = ["*"]

    # Pagination defaults
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Region/type grid
    GRID_LEAF_CAP: int = int(os.getenv("GRID_LEAF_CAP", "5"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration on startup."""
        if cls.DATA_DIR and not os.path.isdir(cls.DATA_DIR):
            raise FileNotFoundError(f"Data directory not found: {cls.DATA_DIR}")
        if cls.GRID_LEAF_CAP < 1:
            raise ValueError(f"GRID_LEAF_CAP must be positive, got {cls.GRID_LEAF_CAP}")


# Global config instance
config = Config()
