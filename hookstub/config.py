"""
Configuration utilities for the hook stub generator.

Two sources feed the render context: the metadata file shipped with this
package (version and homepage) and the environment of the package manager
running the install (consuming package name, homepage and directory).
"""
import os
import logging
from typing import Dict, Mapping, Optional

import yaml
from dotenv import dotenv_values

from hookstub.errors import MetadataError

logger = logging.getLogger(__name__)

# Packaged metadata file, next to this module
DEFAULT_METADATA_PATH = os.path.join(os.path.dirname(__file__), 'package.yaml')

REQUIRED_METADATA_KEYS = ('version', 'homepage')

# Environment variables set by npm for the package being installed
PKG_NAME_VAR = 'npm_package_name'
PKG_HOMEPAGE_VAR = 'npm_package_homepage'
PKG_DIRECTORY_VAR = 'PWD'

PACKAGE_ENV_VARS = (PKG_NAME_VAR, PKG_HOMEPAGE_VAR, PKG_DIRECTORY_VAR)


def load_package_metadata(metadata_path: str = None) -> Dict[str, str]:
    """
    Load this tool's own metadata from its packaged YAML file.

    Args:
        metadata_path: Path to the metadata file. If None, uses the packaged file.

    Returns:
        Metadata dictionary with at least 'version' and 'homepage'.

    Raises:
        MetadataError: If the file cannot be read, is not valid YAML,
            or lacks a required key.
    """
    if not metadata_path:
        metadata_path = DEFAULT_METADATA_PATH

    logger.debug(f"Loading package metadata from {metadata_path}")

    try:
        with open(metadata_path, 'r', encoding='utf-8') as f:
            metadata = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading package metadata: {str(e)}")
        raise MetadataError(
            "Unable to read package metadata", path=metadata_path, original_exception=e
        ) from e

    if not isinstance(metadata, dict):
        logger.error(f"Package metadata in {metadata_path} is not a mapping")
        raise MetadataError("Package metadata must be a mapping", path=metadata_path)

    missing = [key for key in REQUIRED_METADATA_KEYS if metadata.get(key) is None]
    if missing:
        logger.error(f"Package metadata is missing keys: {', '.join(missing)}")
        raise MetadataError(
            f"Package metadata is missing keys: {', '.join(missing)}", path=metadata_path
        )

    # YAML reads versions such as 1.0 as floats
    result = {key: str(value) for key, value in metadata.items()}
    logger.info(f"Loaded package metadata: {result.get('name')} {result['version']}")
    return result


def load_package_env(
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
) -> Dict[str, Optional[str]]:
    """
    Read the consuming package's name, homepage and directory.

    Values from the process environment win over values found in the
    optional .env file. Neither source is modified.

    Args:
        env: Environment mapping. If None, os.environ is used.
        dotenv_path: Optional path to a .env file to fall back on.

    Returns:
        Dictionary keyed by variable name; unset variables map to None.
    """
    if env is None:
        env = os.environ

    fallback = dotenv_values(dotenv_path) if dotenv_path else {}

    result = {}
    for name in PACKAGE_ENV_VARS:
        value = env.get(name)
        if value is None:
            value = fallback.get(name)
        if value is None:
            logger.debug(f"Environment variable '{name}' not set")
        result[name] = value

    return result
