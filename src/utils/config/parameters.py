"""Central configuration manager.

Loads the optional ``.env`` file (so values such as ``LOG_LEVEL`` reach the
process environment) and exposes the constant parameters used by the demo entry
point through dictionary-style and method-based access.
"""

from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv


class ParameterLoader:
    """Centralized configuration manager for all runtime parameters."""

    _ENV_FILEPATH = ".env"

    def __init__(self, env_filepath: str = _ENV_FILEPATH) -> None:
        self.env_filepath = Path(env_filepath)
        load_dotenv(dotenv_path=self.env_filepath)
        self._parameters: Dict[str, Any] = self._initialize_parameters()

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary with the constant values."""
        constant_params = {
            "demo_invalid_time": [25, 50],
            "demo_valid_time": [15, 50],
        }
        return {**constant_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else default."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]
