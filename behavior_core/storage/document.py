"""
In-memory JSON document store
Values are addressed with JSON pointers ("/nodes/0/translation")
"""
import copy
from typing import Any, Dict, List, Optional, Union

from .base import ExternalStore
from ..core.errors import ExternalPathError
from ..core.types import ExternalPath
from ..utils.logger import get_logger

logger = get_logger(__name__)


def split_pointer(path: ExternalPath) -> List[str]:
    """
    Split a JSON pointer into unescaped reference tokens
    
    Raises:
        ExternalPathError: If the pointer is neither empty nor starts with '/'
    """
    if path == "":
        return []
    if not path.startswith("/"):
        raise ExternalPathError(path, "is not a JSON pointer")
    return [token.replace("~1", "/").replace("~0", "~") for token in path[1:].split("/")]


def _list_index(path: ExternalPath, container: list, token: str, allow_append: bool) -> int:
    if token == "-" and allow_append:
        return len(container)
    if not token.isdigit() or (len(token) > 1 and token.startswith("0")):
        raise ExternalPathError(path, f"has invalid array index '{token}'")
    index = int(token)
    limit = len(container) + 1 if allow_append else len(container)
    if index >= limit:
        raise ExternalPathError(path, f"has array index {index} out of range")
    return index


class DocumentStore(ExternalStore):
    """JSON document held in memory, read and written by JSON pointer"""
    
    def __init__(self, document: Optional[Union[Dict[str, Any], List[Any]]] = None):
        """
        Initialize document store
        
        Args:
            document: Initial document (default: empty object); copied, not shared
        """
        self.document = copy.deepcopy(document) if document is not None else {}
    
    def get(self, path: ExternalPath) -> Any:
        """
        Read the value at a JSON pointer
        
        Raises:
            ExternalPathError: If the pointer does not resolve
        """
        current = self.document
        for token in split_pointer(path):
            if isinstance(current, dict):
                if token not in current:
                    raise ExternalPathError(path)
                current = current[token]
            elif isinstance(current, list):
                current = current[_list_index(path, current, token, allow_append=False)]
            else:
                raise ExternalPathError(path)
        return current
    
    def set(self, path: ExternalPath, value: Any) -> None:
        """
        Write a value at a JSON pointer
        
        Missing intermediate objects are created. "-" (or the array length)
        as the last token appends to an array.
        
        Raises:
            ExternalPathError: If the pointer runs through a scalar or a bad array index
        """
        tokens = split_pointer(path)
        if not tokens:
            self.document = value
            return
        
        current = self.document
        for token in tokens[:-1]:
            if isinstance(current, dict):
                current = current.setdefault(token, {})
            elif isinstance(current, list):
                current = current[_list_index(path, current, token, allow_append=False)]
            else:
                raise ExternalPathError(path, "runs through a non-container value")
        
        last = tokens[-1]
        if isinstance(current, dict):
            current[last] = value
        elif isinstance(current, list):
            index = _list_index(path, current, last, allow_append=True)
            if index == len(current):
                current.append(value)
            else:
                current[index] = value
        else:
            raise ExternalPathError(path, "runs through a non-container value")
        logger.debug(f"Set {path} = {value!r}")
    
    def to_dict(self) -> Any:
        """Deep copy of the document"""
        return copy.deepcopy(self.document)
