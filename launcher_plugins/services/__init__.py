"""
Data-source adapters used by the launcher plugins.
Modules that need system libraries are imported lazily by the plugin entry points.
"""
