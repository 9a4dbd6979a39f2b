import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class RunConfig:
    # stop before parsing when scanning reported errors
    fail_fast: bool = False
    log_level: str = "WARNING"


def load_config() -> RunConfig:
    return RunConfig(
        fail_fast=os.environ.get("SUMIRE_FAIL_FAST", "").strip().lower() in TRUTHY,
        log_level=os.environ.get("SUMIRE_LOG_LEVEL", "WARNING").upper(),
    )
