# catalog_api/utils/settings.py
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

NAME_POLICIES = ("strict", "permissive")
EMPTY_RESULT_POLICIES = ("empty", "not_found")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


NAME_POLICY = os.getenv("NAME_POLICY", "strict")
EMPTY_RESULT_POLICY = os.getenv("EMPTY_RESULT_POLICY", "empty")
COST_ENABLED = _flag("COST_ENABLED")
ERROR_TIMESTAMPS = _flag("ERROR_TIMESTAMPS")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))


@dataclass(frozen=True)
class CatalogProfile:
    """
    Deployment profile of the catalog.
    One value per behaviour, the alternatives are never mixed in one process.
    """

    name_policy: str = "strict"
    empty_result_policy: str = "empty"
    cost_enabled: bool = False
    error_timestamps: bool = False

    def __post_init__(self):
        if self.name_policy not in NAME_POLICIES:
            raise ValueError(f"Unknown name policy: {self.name_policy!r}")
        if self.empty_result_policy not in EMPTY_RESULT_POLICIES:
            raise ValueError(f"Unknown empty result policy: {self.empty_result_policy!r}")


def load_profile() -> CatalogProfile:
    return CatalogProfile(
        name_policy=NAME_POLICY,
        empty_result_policy=EMPTY_RESULT_POLICY,
        cost_enabled=COST_ENABLED,
        error_timestamps=ERROR_TIMESTAMPS,
    )
