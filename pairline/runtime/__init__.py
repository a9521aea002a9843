"""Runtime package.

Builds the process-wide dependencies (settings, controller, admission control)
once at startup.
"""

__all__: list[str] = []
