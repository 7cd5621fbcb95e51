"""
Configuration Loader

Loads YAML configuration files for brand matching: the word lists that
gate candidate brands and the per-run settings (sources, countries,
input and output locations).
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'word_lists.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_word_lists_config() -> Dict[str, Any]:
    """
    Load the raw word lists used by the brand assigner.

    Returns:
        Dictionary with keys 'words_to_ignore', 'front_words',
        'front_or_second_words' and 'capitalized'

    Example:
        {
            'words_to_ignore': ['PLUS', 'FORTE', ...],
            'front_words': ['baby', ...],
            'front_or_second_words': ['kids', ...],
            'capitalized': 'NOW',
        }
    """
    config = load_config('word_lists.yaml')
    return {
        'words_to_ignore': list(config.get('words_to_ignore') or []),
        'front_words': list(config.get('front_words') or []),
        'front_or_second_words': list(config.get('front_or_second_words') or []),
        'capitalized': config.get('capitalized'),
    }


def load_matching_settings() -> Dict[str, Any]:
    """
    Load brand matching run settings.

    Returns:
        Dictionary with 'sources', 'countries', 'relations_file',
        'products_file' and 'output_dir'
    """
    return load_config('brand_matching.yaml')


def get_known_sources(settings: Dict[str, Any] = None) -> List[str]:
    """Return the configured product sources."""
    if settings is None:
        settings = load_matching_settings()
    return list(settings.get('sources') or [])


def get_known_countries(settings: Dict[str, Any] = None) -> List[str]:
    """Return the configured country codes."""
    if settings is None:
        settings = load_matching_settings()
    return list(settings.get('countries') or [])
