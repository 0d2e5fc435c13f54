"""FeatureService — report which rules a configuration resolves to."""

from __future__ import annotations

from typing import TYPE_CHECKING

from amptheme.domain.types import Phase
from amptheme.rules.registry import DEFAULT_REGISTRY, FeatureRegistry
from amptheme.rules.resolver import resolve, theme_defaults
from amptheme.services.result import ServiceResult

if TYPE_CHECKING:
    from amptheme.config.models import RuntimeConfig


class FeatureService:
    """Read-only queries over the feature registry."""

    def __init__(self, *, registry: FeatureRegistry = DEFAULT_REGISTRY) -> None:
        self._registry = registry

    def list_rules(self, config: RuntimeConfig, phase: Phase | None = None) -> ServiceResult:
        """Resolved rules for *config*, for one phase or both (pre-parse first)."""
        phases = [phase] if phase is not None else [Phase.PRE_PARSE, Phase.POST_PARSE]
        rules = [
            {"name": rule.name, "phase": str(rule.spec.phase), "params": rule.params}
            for p in phases
            for rule in resolve(
                config.theme_candidates, config.explicit_rules, p, registry=self._registry
            )
        ]
        known_theme = bool(theme_defaults(config.theme_candidates, self._registry))
        warnings: list[str] = []
        if not known_theme:
            warnings.append(f"Theme {config.theme!r} has no built-in rules")
        unknown = [name for name in config.explicit_rules if self._registry.rule(name) is None]
        warnings.extend(f"Unknown rule {name!r} ignored" for name in unknown)
        return ServiceResult(
            ok=True,
            op="list_rules",
            data={
                "theme": str(config.theme),
                "template": str(config.template),
                "rules": rules,
                "count": len(rules),
            },
            warnings=warnings,
        )

    def list_themes(self) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="list_themes",
            data={
                "themes": {
                    str(theme): [str(name) for name in features]
                    for theme, features in self._registry.theme_features.items()
                }
            },
        )
