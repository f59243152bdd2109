"""
Git hook script template.

The rendered script is what gets installed in the .git/hooks directory of the
repository. It is assembled from a fixed sequence of sections, each built from
the render context.
"""

from typing import Optional

from hookstub.git_hooks.context import WIN32, RenderContext, build_context

# Used to identify scripts created by Husky
HUSKY_IDENTIFIER = "# husky"

# Experimental
HUSKYRC = "~/.huskyrc"

DEBUG_ENV_VAR = "HUSKY_DEBUG"
DEBUG_ENV_VALUE = "true"

SCRIPT_SUFFIX = ".js"

# Written in place of unset package fields
MISSING_VALUE = "undefined"


def _or_missing(value: Optional[str]) -> str:
    return MISSING_VALUE if value is None else value


def _header(context: RenderContext) -> str:
    return (
        "#!/bin/sh\n"
        f"{HUSKY_IDENTIFIER}\n"
        "\n"
        "# Hook created by Husky\n"
        f"#   Version: {context.version}\n"
        f"#   At: {context.created_at}\n"
        f"#   See: {context.homepage}\n"
        "\n"
        "# From npm package\n"
        f"#   Name: {_or_missing(context.pkg_name)}\n"
        f"#   Directory: {_or_missing(context.pkg_directory)}\n"
        f"#   Homepage: {_or_missing(context.pkg_homepage)}\n"
        "\n"
    )


def _variables(context: RenderContext) -> str:
    return (
        f'scriptPath="{context.run_script_path}{SCRIPT_SUFFIX}"\n'
        'hookName=`basename "$0"`\n'
        'gitParams="$*"\n'
        "\n"
    )


def _debug_helper(context: RenderContext) -> str:
    return (
        "debug() {\n"
        f'  [ "${{{DEBUG_ENV_VAR}}}" = "{DEBUG_ENV_VALUE}" ] && echo "husky:debug $1"\n'
        "}\n"
        "\n"
        'debug "$hookName hook started..."\n'
    )


def _node_check(context: RenderContext) -> str:
    # Windows hooks call node directly
    if context.platform == WIN32:
        return ""
    return (
        "\n"
        "if ! command -v node >/dev/null 2>&1; then\n"
        "  echo \"Can't find node in PATH, trying to find a node binary on your system\"\n"
        "fi\n"
    )


def _run_script(context: RenderContext) -> str:
    return (
        "\n"
        "if [ -f $scriptPath ]; then\n"
        f"  if [ -f {HUSKYRC} ]; then\n"
        f'    debug "source {HUSKYRC}"\n'
        f"    source {HUSKYRC}\n"
        "  fi\n"
        '  if [ -f "./src" ]; then\n'
        f'    {context.node} $scriptPath $hookName "$gitParams"\n'
        "  fi\n"
        "else\n"
        "  echo \"Can't find Husky, skipping $hookName hook\"\n"
        "  echo \"You can reinstall it using 'npm install husky --save-dev' or delete this hook\"\n"
        "fi\n"
    )


SECTIONS = (_header, _variables, _debug_helper, _node_check, _run_script)


def render(context: RenderContext) -> str:
    """
    Render the hook script for the given context.

    Args:
        context: Populated render context.

    Returns:
        The shell script text. Nothing is written to disk.
    """
    return "".join(section(context) for section in SECTIONS)


def is_husky_script(content: str) -> bool:
    """
    Check if a hook script was created by this tool.

    Args:
        content: Text of an existing hook file.

    Returns:
        True if a line of the script is the identifier, ignoring trailing
        whitespace, False otherwise.
    """
    return any(line.rstrip() == HUSKY_IDENTIFIER for line in content.splitlines())


def get_script(
    root_dir: str,
    husky_dir: str,
    run_node_path: str,
    platform: Optional[str] = None,
    dotenv_path: Optional[str] = None,
) -> str:
    """
    Build the context for the current environment and render the hook script.

    Args:
        root_dir: Project root directory.
        husky_dir: Installed package directory.
        run_node_path: Resolved run-node binary path.
        platform: Platform the hook is generated for. Defaults to sys.platform.
        dotenv_path: Optional .env file with package variables.

    Returns:
        The shell script text.
    """
    return render(build_context(
        root_dir, husky_dir, run_node_path, platform, dotenv_path=dotenv_path
    ))
