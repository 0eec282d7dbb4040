"""
Local JSON file store
A DocumentStore loaded from, and saved back to, a JSON file
"""
import json
from pathlib import Path
from typing import Union

from .document import DocumentStore
from ..utils.logger import get_logger

logger = get_logger(__name__)


class LocalJSONStore(DocumentStore):
    """JSON file backed document store"""
    
    def __init__(self, file_path: Union[str, Path]):
        """
        Initialize local JSON store
        
        Args:
            file_path: JSON file holding the document (an empty object is used if missing)
        """
        self.file_path = Path(file_path)
        document = {}
        if self.file_path.exists():
            with open(self.file_path, 'r', encoding='utf-8') as f:
                document = json.load(f)
            logger.debug(f"Loaded world document from {self.file_path}")
        super().__init__(document)
    
    def save(self) -> None:
        """Write the document back to its file"""
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file_path, 'w', encoding='utf-8') as f:
            json.dump(self.document, f, indent=2)
        logger.info(f"Saved world document to {self.file_path}")
