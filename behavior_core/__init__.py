"""
Behavior Core
Data-driven interpreter for glTF behavior graphs
"""
__version__ = "0.1.0"
