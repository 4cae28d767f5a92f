import os

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    Central source for runtime settings.
    Results never depend on these, only the diagnostics written to stderr.
    """
    LOG_LEVEL = os.getenv("PACE_LOG_LEVEL", "WARNING").strip().upper()

    @classmethod
    def validate(cls):
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(
                f"PACE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )
