"""Core modules for codeshim.

Configuration, paths, theming, and launch coordination.
"""

from codeshim.core.config import ShimConfig, load_config
from codeshim.core.launch import LaunchError, Resolution, launch

__all__ = ["LaunchError", "Resolution", "ShimConfig", "launch", "load_config"]
