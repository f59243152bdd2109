"""
Git hooks module for the hook stub generator.

This module provides the render context for a hook script and the renderer
that turns it into the shell text git executes.
"""
