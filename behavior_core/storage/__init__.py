"""
External stores for Behavior Core
Host documents that node behaviors reach through the binding context
"""
from .base import ExternalStore
from .document import DocumentStore
from .local_json import LocalJSONStore

__all__ = ['ExternalStore', 'DocumentStore', 'LocalJSONStore']
