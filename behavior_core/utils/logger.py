"""
Logging configuration for Behavior Core
Provides structured logging with appropriate log levels
"""
import logging
import sys
from typing import Optional


def setup_logger(
    name: str = "behavior_core",
    level: Optional[int] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with consistent formatting
    
    Args:
        name: Logger name (default: "behavior_core")
        level: Log level (default: INFO, or DEBUG if Config.DEBUG is True)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    # Don't add handlers if they already exist
    if logger.handlers:
        return logger
    
    if level is None:
        # Imported here, config imports the logger lazily as well
        from ..core.config import Config
        level = logging.DEBUG if Config.DEBUG else logging.INFO
    logger.setLevel(level)
    
    # stderr keeps log lines out of CLI output written to stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    
    if format_string is None:
        format_string = "[%(levelname)s] %(name)s: %(message)s"
    
    handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(handler)
    
    # Prevent propagation to root logger
    logger.propagate = False
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger for a module
    
    Args:
        name: Module name (typically __name__)
    
    Returns:
        Logger instance
    """
    logger_name = name.split('.')[-1] if '.' in name else name
    return setup_logger(f"behavior_core.{logger_name}")
