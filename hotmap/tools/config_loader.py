"""
Configuration loader for hotmap profiles and environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional
import yaml

from ..spatial.clustering import ClusteringConfig
from ..spatial.density import DensityConfig
from ..spatial.focus import FocusConfig

DEFAULT_PROFILE = "default"
PROFILE_ENV_VAR = "HOTMAP_PROFILE"


class ConfigLoader:
    """Load and manage configuration from YAML files and environment."""

    CONFIG_DIR = Path(__file__).parent.parent / "configs"

    @classmethod
    def load_profile(cls, profile_name: str = DEFAULT_PROFILE) -> Dict[str, Any]:
        """
        Load a named configuration profile.

        Args:
            profile_name: Name of the profile (default, dense-city)

        Returns:
            Dictionary with configuration values

        Raises:
            FileNotFoundError: If profile doesn't exist
        """
        profile_path = cls.CONFIG_DIR / f"{profile_name}.yaml"

        if not profile_path.exists():
            available = sorted(f.stem for f in cls.CONFIG_DIR.glob("*.yaml"))
            raise FileNotFoundError(
                f"Profile '{profile_name}' not found. Available profiles: {', '.join(available)}"
            )

        with open(profile_path, "r") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def get_profile_from_env(cls) -> Optional[str]:
        """Get profile name from HOTMAP_PROFILE environment variable."""
        return os.getenv(PROFILE_ENV_VAR)

    @classmethod
    def load_default_or_env_profile(cls) -> Dict[str, Any]:
        """
        Load profile from environment variable or use the default profile.

        Returns:
            Configuration dictionary
        """
        profile = cls.get_profile_from_env() or DEFAULT_PROFILE
        return cls.load_profile(profile)


@dataclass
class HotmapSettings:
    """Clustering, focus and density configuration for one profile."""
    clustering: ClusteringConfig = field(default_factory=ClusteringConfig)
    focus: FocusConfig = field(default_factory=FocusConfig)
    density: DensityConfig = field(default_factory=DensityConfig)

    @classmethod
    def from_profile(cls, profile: Dict[str, Any]) -> "HotmapSettings":
        return cls(
            clustering=ClusteringConfig.from_dict(profile.get("clustering")),
            focus=FocusConfig.from_dict(profile.get("focus")),
            density=DensityConfig.from_dict(profile.get("density")),
        )


def get_config() -> Dict[str, Any]:
    """Convenience function to get current configuration."""
    return ConfigLoader.load_default_or_env_profile()


def load_hotmap_settings(profile_name: Optional[str] = None) -> HotmapSettings:
    """Build settings from ``profile_name`` or the environment-selected profile."""
    if profile_name:
        profile = ConfigLoader.load_profile(profile_name)
    else:
        profile = get_config()
    return HotmapSettings.from_profile(profile)
