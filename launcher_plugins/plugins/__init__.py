"""
Plugins for the launcher.
Each module is the entry point of one plugin process.
"""
