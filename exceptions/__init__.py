"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from exceptions.bootstrap_exceptions import (
    BootstrapError,
    ConfigurationError,
    InvalidPortError,
    ContainerError,
    ServerStartError,
    ContextStateError
)

__all__ = [
    'BootstrapError',
    'ConfigurationError',
    'InvalidPortError',
    'ContainerError',
    'ServerStartError',
    'ContextStateError',
]
