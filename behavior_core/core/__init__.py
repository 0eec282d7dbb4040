"""
Core module for Behavior Core
Provides configuration, graph documents and the execution engine
"""
from .config import Config

__all__ = ["Config"]
