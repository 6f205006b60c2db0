# dfa_animator/plugins/json_exporter.py
import json
import re
from typing import Dict
from .api import DfaExporterPlugin
from ..utils.config import DEFAULT_EXPORT_BASENAME, EXPORT_FILE_EXTENSION


def export_basename(automaton_name: str) -> str:
    """`Ends with a` -> `ends-with-a`."""
    slug = re.sub(r"\s+", "-", (automaton_name or "").strip()).lower()
    return slug or DEFAULT_EXPORT_BASENAME


class JsonExporter(DfaExporterPlugin):
    @property
    def name(self) -> str:
        return "DFA JSON"

    @property
    def file_filter(self) -> str:
        return "JSON Files (*.json)"

    def export(self, automaton_data: dict, **kwargs) -> Dict[str, str]:
        # Key order comes from automaton_to_dict, so output is stable across runs.
        content = json.dumps(automaton_data, indent=2, ensure_ascii=False)
        base_filename = kwargs.get("base_filename") or export_basename(automaton_data.get("name", ""))
        return {f"{base_filename}{EXPORT_FILE_EXTENSION}": content}
