"""
Configuration utilities for SentenceFuzzy.

Provides configuration loading and validation for the fuzzy comparer.
"""

import logging
import yaml
from typing import Dict, Any
from pathlib import Path

from sentence_fuzzy.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/sentence_fuzzy.yaml"


def load_comparer_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load comparer configuration from YAML file.

    Values found under the ``comparison`` section override the defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    config_file = Path(config_path)
    if not config_file.exists():
        logger.warning(f"Configuration file {config_path} not found, using defaults")
        return get_default_comparer_config()

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration from {config_path}: {e}")
        return get_default_comparer_config()

    if not isinstance(config, dict):
        logger.error(f"Configuration in {config_path} is not a mapping, using defaults")
        return get_default_comparer_config()

    comparison_config = config.get('comparison') or {}
    if not isinstance(comparison_config, dict):
        logger.error("comparison section must be a mapping, using defaults")
        return get_default_comparer_config()

    logger.info(f"Loaded comparer configuration from {config_path}")
    return merge_configs(get_default_comparer_config(), comparison_config)


def get_default_comparer_config() -> Dict[str, Any]:
    """
    Get default comparer configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "threshold_sentence": 0.25,
        "threshold_word": 0.45,
        "min_word_length": 3,
        "subtoken_length": 2
    }


def check_comparer_settings(threshold_sentence: float, threshold_word: float,
                            min_word_length: int, subtoken_length: int) -> None:
    """
    Enforce the construction rules of the comparer.

    Lengths must be ``int`` values, so a YAML ``2.0`` is rejected.

    Raises:
        ConfigurationError: with a distinct message for the first rule violated
    """
    if not _is_number(threshold_sentence):
        raise ConfigurationError("A threshold for sentence must be a number.")

    if threshold_sentence <= 0:
        raise ConfigurationError("A threshold for sentence can not be less than or equal to 0.")

    if not _is_number(threshold_word):
        raise ConfigurationError("A threshold for word must be a number.")

    if not _is_integer(min_word_length):
        raise ConfigurationError("A word length must be an integer.")

    if min_word_length <= 0:
        raise ConfigurationError("A word length can not be less than or equal to 0.")

    if not _is_integer(subtoken_length):
        raise ConfigurationError("A subtoken length must be an integer.")

    if subtoken_length <= 0:
        raise ConfigurationError("A subtoken length can not be less than or equal to 0.")

    if subtoken_length > min_word_length:
        raise ConfigurationError("A subtoken length can not be larger than min_word_length.")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_comparer_config(config: Dict[str, Any]) -> bool:
    """
    Validate comparer configuration.

    Args:
        config: Configuration dictionary

    Returns:
        True if configuration is valid, False otherwise
    """
    try:
        check_comparer_settings(
            config.get("threshold_sentence"),
            config.get("threshold_word"),
            config.get("min_word_length"),
            config.get("subtoken_length")
        )
    except ConfigurationError as e:
        logger.error(f"Invalid comparer configuration: {e}")
        return False

    logger.info("Configuration validation passed")
    return True


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Args:
        base_config: Base configuration
        override_config: Override configuration

    Returns:
        Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged
