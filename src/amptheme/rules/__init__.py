"""Rewrite rules — registry, resolution, executors and the sanitizer entry points."""

from amptheme.rules.registry import DEFAULT_REGISTRY, FeatureRegistry, build_feature_registry
from amptheme.rules.resolver import ResolvedRule, resolve
from amptheme.rules.sanitizer import CoreThemeSanitizer

__all__ = [
    "DEFAULT_REGISTRY",
    "CoreThemeSanitizer",
    "FeatureRegistry",
    "ResolvedRule",
    "build_feature_registry",
    "resolve",
]
