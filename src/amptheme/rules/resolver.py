"""Feature resolver — which rules run for a theme, in what order, with which params.

Ordering: explicit rules first in caller order, then the theme's remaining
rules in registry order. Parameters: theme defaults overlaid by explicit
values. Names without an executor are dropped, so a typo in a config file
disables one rule instead of failing the document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from amptheme.domain.theme_config import merge_rule_params
from amptheme.domain.types import Phase
from amptheme.rules.registry import DEFAULT_REGISTRY, FeatureRegistry, RuleSpec, ThemeFeatures

logger = logging.getLogger(__name__)


class ResolvedRule(NamedTuple):
    """A rule ready to run: its name, merged parameters and executor spec."""

    name: str
    params: dict[str, Any]
    spec: RuleSpec


def theme_defaults(
    themes: str | Sequence[str],
    registry: FeatureRegistry = DEFAULT_REGISTRY,
) -> ThemeFeatures:
    """Rule table of the first of *themes* known to the registry, or ``{}``."""
    candidates = (themes,) if isinstance(themes, str) else tuple(themes)
    for theme in candidates:
        features = registry.features_for(theme)
        if features is not None:
            return features
    return {}


def resolve(
    themes: str | Sequence[str],
    explicit_rules: Mapping[str, Mapping[str, Any]],
    phase: Phase,
    *,
    registry: FeatureRegistry = DEFAULT_REGISTRY,
) -> list[ResolvedRule]:
    """Resolve the ordered, name-unique rule list for *phase*.

    Args:
        themes: Theme identifier, or candidates checked in order (child first).
        explicit_rules: Caller-requested rules and parameters; applied even
            when no candidate theme is registered.
        phase: Only rules declared for this phase are returned.
        registry: Rule and theme tables to resolve against.
    """
    defaults = theme_defaults(themes, registry)

    ordered: dict[str, dict[str, Any]] = {}
    for name, params in explicit_rules.items():
        ordered[name] = merge_rule_params(defaults.get(name, {}), params)
    for name, params in defaults.items():
        if name not in ordered:
            ordered[name] = dict(params)

    resolved: list[ResolvedRule] = []
    for name, params in ordered.items():
        spec = registry.rule(name)
        if spec is None:
            logger.debug("Dropping unknown rule %r", name)
            continue
        if spec.phase != phase:
            continue
        resolved.append(ResolvedRule(spec.name, params, spec))
    return resolved
