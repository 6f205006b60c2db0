# dfa_animator/assets/assets.py
"""
Central loader for all static asset data from JSON files.

This module acts as the single source of truth for the built-in automaton
library. It loads it from the adjacent 'data' directory and exposes it as a
Python constant.
"""
import json
import os
import logging

logger = logging.getLogger(__name__)

# --- Centralized Data Loading Logic ---

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

def _load_json_asset(filename: str, fallback_data: dict) -> dict:
    """
    Loads data from a JSON file in the data directory with robust error handling.
    """
    filepath = os.path.join(_DATA_DIR, filename)
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            logger.debug(f"Loading asset data from: {filepath}")
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Asset data file not found: {filepath}. Using fallback data.")
        return fallback_data
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from {filepath}: {e}. Using fallback data.")
        return fallback_data

# --- Public Data Constants ---

# Built-in automata, keyed by category: {key: {"name": display name, "dfas": [...]}}
DFA_LIBRARY = _load_json_asset('dfa_library.json', {})
