"""Extension layer — plugin system via pluggy.

Plugins contribute theme rule tables and theme configs at startup.
INVARIANT: Plugin failures are warnings, never errors.
"""

from amptheme.plugins.manager import PluginManager

__all__ = ["PluginManager"]
