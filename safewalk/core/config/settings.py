# File: safewalk/core/config/settings.py

import os


class Settings:
    # --- Traversal ---
    # Symlinked directories are only descended into when this is on.
    # There is no cycle detection, so loops are the caller's problem.
    FOLLOW_SYMLINKS: bool = os.getenv("SAFEWALK_FOLLOW_SYMLINKS", "false").lower() == "true"

    # Name prefix that marks an entry HIDDEN on hosts without st_file_attributes
    HIDDEN_PREFIX: str = os.getenv("SAFEWALK_HIDDEN_PREFIX", ".")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("SAFEWALK_LOG_LEVEL", "WARNING").upper()

    # --- Sizes ---
    # Largest byte count a size window may reach (signed 64-bit st_size).
    MAX_BYTE_COUNT: int = 2**63 - 1


settings = Settings()
