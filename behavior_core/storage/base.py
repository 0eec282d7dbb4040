"""
Abstract external store interface for Behavior Core
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..core.types import ExternalPath


class ExternalStore(ABC):
    """Abstract interface for state living outside the behavior graph"""
    
    @abstractmethod
    def get(self, path: ExternalPath) -> Any:
        """Read the value at path"""
        pass
    
    @abstractmethod
    def set(self, path: ExternalPath, value: Any) -> None:
        """Write value at path"""
        pass
    
    def binding_callbacks(self) -> Dict[str, Any]:
        """
        Keyword arguments wiring this store into an Interpreter
        
        Example:
            interpreter = Interpreter(**store.binding_callbacks())
        """
        return {'set_external': self.set, 'get_external': self.get}
