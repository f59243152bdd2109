"""
Git hook stub generator.

Renders the small shell script that git runs for each hook and that hands
control over to the package's own run script.
"""

from hookstub.git_hooks.context import RenderContext, build_context
from hookstub.git_hooks.hooks import HUSKY_IDENTIFIER, get_script, is_husky_script, render

__all__ = [
    "HUSKY_IDENTIFIER",
    "RenderContext",
    "build_context",
    "get_script",
    "is_husky_script",
    "render",
]
