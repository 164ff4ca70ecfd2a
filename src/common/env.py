"""Environment configuration interface for validatepath.

All environment variable access goes through this module. Values may also be
supplied in a ``.env`` file in the working directory.
"""

import os

from dotenv import load_dotenv

load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level(default: str = "INFO") -> str:
        """Get the logging level name.

        Returns:
            Level name from LOG_LEVEL, defaults to ``default``
        """
        return os.getenv("LOG_LEVEL", default)

    @staticmethod
    def platform() -> str:
        """Get the path grammar used when no parser is supplied.

        Returns:
            One of 'auto', 'posix' or 'windows' from VALIDATE_PATH_PLATFORM,
            defaults to 'auto' (follow the host operating system)
        """
        return os.getenv("VALIDATE_PATH_PLATFORM", "auto").lower()


# Singleton instance for convenient access
env = Environment()
