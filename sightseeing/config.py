"""Configuration module for constants, instance files, and settings."""

from typing import List, Optional
from pydantic_settings import BaseSettings


# Instance file markers
NAME_SEPARATOR = ":"
HOTEL_MARKER = "HOTEL_LOCATION"
AIRPORT_MARKER = "AIRPORT_LOCATION"
POINTS_OF_INTEREST_MARKER = "POINTS_OF_INTEREST"
EOF_MARKER = "EOF"


# Benchmark instances, indexed by instance id
INSTANCE_FILES: List[str] = [
    "square.ssp",
    "libraries-15.ssp",
    "carparks-40.ssp",
    "tramstops-85.ssp",
    "grid.ssp",
    "clustered.ssp",
    "chatgpt-instance-100.ssp",
]


# Experimental defaults
DEFAULT_SEED = 17032025
DEFAULT_TIME_LIMIT_SECONDS = 60.0

# Solution memory slots used by the search loops
CURRENT_SOLUTION_INDEX = 0
CANDIDATE_SOLUTION_INDEX = 1
MIN_MEMORY_SIZE = 2


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Run parameters
    SEED: int = DEFAULT_SEED
    TIME_LIMIT_SECONDS: float = DEFAULT_TIME_LIMIT_SECONDS
    INSTANCE_DIR: str = "instances"

    # Low-level heuristic parameters, both in [0, 1]
    DEPTH_OF_SEARCH: float = 0.2
    INTENSITY_OF_MUTATION: float = 0.2

    # "random" or "constructive"
    INITIALISATION_MODE: str = "random"

    # Validate every produced route (slow, for debugging)
    DEBUG_CHECKS: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "search.log"
    TRACE_FILE: Optional[str] = None
    TRACE_EVERY: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
