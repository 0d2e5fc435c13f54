"""amptheme — rewrite core theme markup into AMP declarative state bindings."""

__version__ = "0.1.0"
