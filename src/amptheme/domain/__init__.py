"""Domain layer — theme identifiers, theme config, bindings and CSS templates."""
