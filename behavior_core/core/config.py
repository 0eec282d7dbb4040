"""
Configuration for Behavior Core
"""
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for Behavior Core"""
    
    # Debug mode (set BEHAVIOR_CORE_DEBUG=true to enable)
    DEBUG: bool = os.getenv("BEHAVIOR_CORE_DEBUG", "").lower() in ("true", "1", "yes")
    
    # Step ceiling for a single run (0 = unbounded, matches the plain graph walk)
    MAX_STEPS: int = int(os.getenv("BEHAVIOR_CORE_MAX_STEPS", "0"))
    
    # API server configuration
    API_HOST: str = os.getenv("BEHAVIOR_CORE_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("BEHAVIOR_CORE_PORT", "7780"))
    
    # Default world document for the CLI (optional)
    WORLD_PATH: Optional[str] = os.getenv("BEHAVIOR_CORE_WORLD_PATH")
    
    @classmethod
    def max_steps(cls) -> Optional[int]:
        """Step ceiling as the interpreter expects it (None when unbounded)"""
        return cls.MAX_STEPS if cls.MAX_STEPS > 0 else None
    
    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        from ..utils.logger import get_logger
        logger = get_logger(__name__)
        
        if cls.MAX_STEPS < 0:
            logger.error("BEHAVIOR_CORE_MAX_STEPS must be 0 (unbounded) or a positive integer")
            return False
        if not 0 < cls.API_PORT < 65536:
            logger.error(f"BEHAVIOR_CORE_PORT out of range: {cls.API_PORT}")
            return False
        return True
