"""
Render context for git hook scripts.

This module builds the immutable record a hook script is rendered from:
paths relative to the project root, the interpreter invocation for the
target platform, the consuming package's metadata and a creation time.
"""

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

from hookstub.config import (
    PKG_DIRECTORY_VAR,
    PKG_HOMEPAGE_VAR,
    PKG_NAME_VAR,
    load_package_env,
    load_package_metadata,
)

logger = logging.getLogger(__name__)

# Platform identifier shared by sys.platform and Node's os.platform()
WIN32 = "win32"

# Interpreter used on Windows, where run-node is not relied upon
WIN32_NODE = "node"

RUN_SCRIPT_NAME = "run"

EXTENDED_LENGTH_PREFIX = "\\\\?\\"


@dataclass(frozen=True)
class RenderContext:
    """Everything a hook script is rendered from."""

    created_at: str
    homepage: str
    node: str
    platform: str
    run_script_path: str
    version: str
    pkg_directory: Optional[str] = None
    pkg_homepage: Optional[str] = None
    pkg_name: Optional[str] = None


def slash(path: str) -> str:
    """
    Convert Windows backslash separators to forward slashes.

    Extended-length paths and paths with non-ASCII characters are returned
    unchanged, since the conversion is not safe for them.
    """
    if path.startswith(EXTENDED_LENGTH_PREFIX) or any(ord(c) > 0x80 for c in path):
        return path
    return path.replace("\\", "/")


def _relative(path: str, start: str) -> str:
    """Relative path from start to path, empty when both are the same directory."""
    relative = os.path.relpath(path, start)
    return "" if relative == os.curdir else relative


def build_context(
    root_dir: str,
    husky_dir: str,
    run_node_path: str,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    metadata_path: Optional[str] = None,
    created_at: Optional[str] = None,
    dotenv_path: Optional[str] = None,
) -> RenderContext:
    """
    Build the render context for a hook script.

    Args:
        root_dir: Project root, e.g. /home/user/project/
        husky_dir: Installed package directory, e.g. /home/user/project/node_modules/husky/
        run_node_path: Resolved run-node binary, e.g. /home/user/project/node_modules/.bin/run-node
        platform: Platform the hook is generated for. Defaults to sys.platform.
        env: Environment to read package variables from. Defaults to os.environ.
        metadata_path: Metadata file to read version and homepage from.
        created_at: Creation time to embed. Defaults to the current time in the
            LC_TIME locale, which stays "C" unless the caller has run
            locale.setlocale(locale.LC_TIME, "").
        dotenv_path: Optional .env file that fills package variables the
            environment lacks.

    Returns:
        The populated RenderContext.

    Raises:
        MetadataError: If the packaged metadata cannot be read.
    """
    if platform is None:
        platform = sys.platform

    run_node_relative = slash(_relative(run_node_path, root_dir))

    # On Windows do not rely on run-node
    node = WIN32_NODE if platform == WIN32 else run_node_relative

    package_env = load_package_env(env, dotenv_path)
    metadata = load_package_metadata(metadata_path)

    run_script_path = slash(os.path.join(_relative(husky_dir, root_dir), RUN_SCRIPT_NAME))

    if created_at is None:
        created_at = datetime.now().strftime("%c")

    logger.debug(f"Hook context for {platform}: node={node}, run script={run_script_path}")

    return RenderContext(
        created_at=created_at,
        homepage=metadata["homepage"],
        node=node,
        platform=platform,
        run_script_path=run_script_path,
        version=metadata["version"],
        pkg_directory=package_env[PKG_DIRECTORY_VAR],
        pkg_homepage=package_env[PKG_HOMEPAGE_VAR],
        pkg_name=package_env[PKG_NAME_VAR],
    )
