"""Configuration module for A/B experiments."""

from .database_configuration import DatabaseConfiguration
from .experiment_config import ExperimentConfig

__all__ = ["DatabaseConfiguration", "ExperimentConfig"]
