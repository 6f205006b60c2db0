# dfa_animator/plugins/api.py
from abc import ABC, abstractmethod
from typing import Dict, Optional


class DfaPluginBase(ABC):
    """
    A common base for all DFA Animator plugins, providing optional metadata.
    """

    @property
    def version(self) -> str:
        """
        The version of the plugin, e.g., "1.0.0".

        Returns:
            A version string. Defaults to "1.0.0".
        """
        return "1.0.0"


class DfaExporterPlugin(DfaPluginBase):
    """
    Abstract Base Class for all exporter plugins.

    To create a new exporter, create a new Python file in the 'plugins'
    directory and define a class that inherits from this one. The
    PluginManager will automatically discover and load it.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        The user-friendly name of the exporter.
        Example: "DFA JSON"
        """
        pass

    @property
    @abstractmethod
    def file_filter(self) -> str:
        """
        The file filter for a save dialog.
        Example: "JSON Files (*.json)"
        """
        pass

    @abstractmethod
    def export(self, automaton_data: Dict, **kwargs) -> Dict[str, str]:
        """
        The core export logic.

        Args:
            automaton_data: The automaton as produced by `automaton_to_dict`.
            **kwargs: Exporter-specific arguments. A common one is
                      'base_filename'.

        Returns:
            A dictionary mapping suggested filenames to their string content.
        """
        pass


class DfaImporterPlugin(DfaPluginBase):
    """
    Abstract Base Class for all importer plugins.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def file_filter(self) -> str:
        pass

    @abstractmethod
    def import_data(self, file_content: str) -> Optional[Dict]:
        """
        Turns file content into an automaton data dictionary, or returns None
        if the content cannot be parsed.
        """
        pass
