# File: dirstat/core/config/settings.py

import os


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


class Settings:
    # Values are read on access, so a bad env var only fails the scan that uses it

    # --- Worker Pool ---
    @property
    def SCAN_WORKERS(self) -> int:
        # Number of threads aggregating matched directories in parallel
        return _env_int("DIRSTAT_SCAN_WORKERS", "8")

    @property
    def DISPATCH_QUEUE_SIZE(self) -> int:
        # Pending matches the discovery walk may queue before it blocks
        return _env_int("DIRSTAT_DISPATCH_QUEUE_SIZE", "64")

    # --- Traversal ---
    @property
    def FOLLOW_SYMLINKS(self) -> bool:
        return os.getenv("DIRSTAT_FOLLOW_SYMLINKS", "false").lower() == "true"

    def validate_pool(self, workers: int, queue_size: int) -> None:
        """Rejects pool sizes the dispatcher cannot run with."""
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}.")
        if queue_size < 1:
            raise ValueError(f"Dispatch queue size must be at least 1, got {queue_size}.")


settings = Settings()
