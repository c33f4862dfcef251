"""
Configuration management for record stream operations.
"""

import os
from typing import ClassVar, Optional
from dataclasses import dataclass, field
import psutil


@dataclass
class RecordwiseConfig:
    """Global configuration for record stream operations."""

    # Decoding
    encoding: str = "utf-8"
    line_terminator: str = "\n"
    strip_carriage_return: bool = True

    # Command predicates
    shell: str = field(default_factory=lambda: os.environ.get("RECORDWISE_SHELL", "/bin/sh"))
    placeholder: str = "$"
    record_variable: str = "it"

    # invoke() collects the whole stream before calling its target
    batch_memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().available * 0.5))

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get("RECORDWISE_LOG_LEVEL", "WARNING"))

    _instance: ClassVar[Optional['RecordwiseConfig']] = None

    @classmethod
    def get_instance(cls) -> 'RecordwiseConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


# Global configuration instance
config = RecordwiseConfig.get_instance()
