"""
Search plugins for the pop-launcher desktop launcher.
Each plugin is a small process that answers launcher queries over stdin/stdout.
"""

__version__ = "0.1.0"
