# dfa_animator/plugins/__init__.py
"""Exporter and importer plugins, discovered at runtime by the PluginManager."""
