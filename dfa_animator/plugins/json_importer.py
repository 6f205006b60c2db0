# dfa_animator/plugins/json_importer.py
import json
import logging
from typing import Dict, Optional
from .api import DfaImporterPlugin

logger = logging.getLogger(__name__)


class JsonImporter(DfaImporterPlugin):
    @property
    def name(self) -> str:
        return "DFA JSON"

    @property
    def file_filter(self) -> str:
        return "JSON Files (*.json)"

    def import_data(self, file_content: str) -> Optional[Dict]:
        try:
            data = json.loads(file_content)
        except json.JSONDecodeError as e:
            logger.error(f"JSON import failed: {e}")
            return None
        if not isinstance(data, dict) or not isinstance(data.get("states"), list):
            logger.error("JSON import failed: missing 'states' list.")
            return None
        return data
