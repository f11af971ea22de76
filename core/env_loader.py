"""
Environment Variable Loader for the SCORM RTE project
Reads an optional project-root .env file and exposes typed getters for settings
"""

import os
import logging
from pathlib import Path
from typing import Optional, Any

logger = logging.getLogger(__name__)


class EnvironmentLoader:
    """
    Loads KEY=value pairs from a .env file into os.environ and provides
    typed accessors with fallback values.
    """

    SENSITIVE_KEYS = {'DJANGO_SECRET_KEY'}

    def __init__(self, env_file_path: Optional[str] = None):
        """
        Args:
            env_file_path: Path to the .env file. If None, uses .env in the project root
        """
        if env_file_path is None:
            project_root = Path(__file__).resolve().parent.parent
            env_file_path = project_root / '.env'

        self.env_file_path = Path(env_file_path)
        self.loaded_variables = {}
        self._load_environment_variables()

    def _load_environment_variables(self):
        if not self.env_file_path.exists():
            logger.debug(f"Environment file not found: {self.env_file_path}, using system environment only")
            return

        logger.info(f"Loading environment variables from: {self.env_file_path}")

        with open(self.env_file_path, 'r', encoding='utf-8') as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()

                if not line or line.startswith('#'):
                    continue

                if '=' not in line:
                    logger.warning(f"Invalid line format in {self.env_file_path}:{line_num}: {line}")
                    continue

                key, value = line.split('=', 1)
                key = key.strip()
                value = value.strip()

                if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
                    value = value[1:-1]

                # Values already exported by the process win over the file
                os.environ.setdefault(key, value)
                self.loaded_variables[key] = value

        logger.info(f"Loaded {len(self.loaded_variables)} environment variables")
        for key, value in self.loaded_variables.items():
            if key in self.SENSITIVE_KEYS:
                logger.debug(f"{key}: {'set' if value else 'not set'}")
            else:
                logger.debug(f"{key}: {value}")

    def get(self, key: str, default: Any = None, required: bool = False) -> Any:
        value = os.environ.get(key, default)

        if required and not value:
            raise ValueError(f"Required environment variable {key} is not set")

        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = os.environ.get(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    def get_int(self, key: str, default: int = 0) -> int:
        try:
            return int(os.environ.get(key, str(default)))
        except ValueError:
            logger.warning(f"Invalid integer value for {key}, using default {default}")
            return default

    def get_list(self, key: str, separator: str = ',', default: list = None) -> list:
        """Get a list environment variable (comma-separated by default)"""
        if default is None:
            default = []

        value = os.environ.get(key, '')
        if not value:
            return default

        return [item.strip() for item in value.split(separator) if item.strip()]


# Global instance
env_loader = EnvironmentLoader()


def get_env(key: str, default: Any = None, required: bool = False) -> Any:
    """Get an environment variable"""
    return env_loader.get(key, default, required)


def get_bool_env(key: str, default: bool = False) -> bool:
    """Get a boolean environment variable"""
    return env_loader.get_bool(key, default)


def get_int_env(key: str, default: int = 0) -> int:
    """Get an integer environment variable"""
    return env_loader.get_int(key, default)


def get_list_env(key: str, separator: str = ',', default: list = None) -> list:
    """Get a list environment variable"""
    return env_loader.get_list(key, separator, default)
