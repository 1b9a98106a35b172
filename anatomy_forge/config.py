# anatomy_forge/config.py
"""
Generator configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Global generator configuration."""

    # Registry behaviour
    # False: a non-root bone missing from the registry gets LOCKED limits
    # and a warning. True: it raises RegistryError.
    strict_registry: bool = False

    # Logging
    log_summary: bool = True  # debug line with bone count / total mass after generation

    # Plotting
    plot_color_by: str = 'side'


# Global config instance
CONFIG = GeneratorConfig()
