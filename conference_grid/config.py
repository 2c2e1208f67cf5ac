"""Library configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class GridConfig(BaseSettings):
    """Grid configuration loaded from CONFERENCE_GRID_* environment variables.

    For local development, put overrides in a .env file in the project root.
    """

    # Parallel room columns, left to right
    room_column_labels: list[str] = Field(
        default=["A", "B", "C", "D", "E"],
        description="Column letters for the parallel session area of the grid",
    )
    room_column_fallback: bool = Field(
        default=True,
        description="Place rooms whose names match no column into free columns",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "CONFERENCE_GRID_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_config: GridConfig | None = None


def get_config() -> GridConfig:
    """Get the configuration singleton.

    Returns:
        GridConfig: configuration instance
    """
    global _config
    if _config is None:
        _config = GridConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
