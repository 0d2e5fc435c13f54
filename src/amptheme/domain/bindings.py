"""Declarative state bindings — amp-state nodes plus amp-bind expressions.

A binding replaces an imperative click handler: the state node carries the
initial JSON value, trigger elements flip it with ``AMP.setState`` and bound
attributes re-evaluate an expression that reads it.

Bound attributes are stored under :data:`BIND_ATTRIBUTE_PREFIX` because
``[class]`` is not a legal attribute name in an lxml tree; serialization
restores the bracket syntax.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, NamedTuple

from lxml import html

BIND_ATTRIBUTE_PREFIX = "data-amp-bind-"


def json_literal(value: Any) -> str:
    """Encode *value* as a JSON literal usable inside an amp-bind expression."""
    return json.dumps(value)


class BoundAttribute(NamedTuple):
    """One attribute driven by a state flag.

    Attributes:
        name: Attribute to bind, e.g. ``"class"``.
        static_value: Value rendered before any state change.
        true_fragment: Suffix appended while the flag is true.
    """

    name: str
    static_value: str
    true_fragment: str


@dataclass(frozen=True)
class StateBinding:
    """A named boolean flag declared once per document."""

    name: str
    initial: bool = False

    @property
    def initial_json(self) -> str:
        return json_literal(self.initial)

    def toggle_action(self, event: str = "tap") -> str:
        """Action that flips the flag when *event* fires on the trigger."""
        return f"{event}:AMP.setState({{ {self.name}: ! {self.name} }})"

    def concat_expression(self, static_value: str, true_fragment: str) -> str:
        """``static + ( flag ? fragment : '' )`` with both operands JSON-encoded."""
        return (
            f"{json_literal(static_value)} + "
            f"( {self.name} ? {json_literal(true_fragment)} : '' )"
        )

    def boolean_expression(self) -> str:
        """Mirror the flag as the strings ``'true'`` / ``'false'``."""
        return f"{self.name} ? 'true' : 'false'"

    def choice_expression(self, when_true: str, when_false: str) -> str:
        """Select between two JSON string literals based on the flag."""
        return f"{self.name} ? {json_literal(when_true)} : {json_literal(when_false)}"

    def class_attribute(self, static_value: str, toggle_class: str) -> BoundAttribute:
        """Bound ``class`` that gains *toggle_class* while the flag is set."""
        return BoundAttribute("class", static_value, f" {toggle_class}")


def bind_attribute_name(name: str) -> str:
    """Tree-safe attribute name for the bound form of *name*."""
    return f"{BIND_ATTRIBUTE_PREFIX}{name}"


def create_state_element(binding: StateBinding) -> html.HtmlElement:
    """Build ``<amp-state id=NAME><script type=application/json>…</script></amp-state>``."""
    state_el = html.Element("amp-state", id=binding.name)
    script_el = html.Element("script", type="application/json")
    script_el.text = binding.initial_json
    state_el.append(script_el)
    return state_el


def apply_bound_attributes(
    element: html.HtmlElement,
    binding: StateBinding,
    attributes: list[BoundAttribute],
) -> None:
    """Set the bound expression for each of *attributes* on *element*.

    Static values are left as they are on the element; only the bound
    counterpart is written.
    """
    for attribute in attributes:
        element.set(
            bind_attribute_name(attribute.name),
            binding.concat_expression(attribute.static_value, attribute.true_fragment),
        )


def apply_aria_expanded(element: html.HtmlElement, binding: StateBinding) -> None:
    """Static ``aria-expanded`` plus its mirrored bound expression."""
    element.set("aria-expanded", binding.initial_json)
    element.set(bind_attribute_name("aria-expanded"), binding.boolean_expression())


def apply_bound_text(
    element: html.HtmlElement,
    binding: StateBinding,
    *,
    when_true: str,
    when_false: str,
) -> None:
    """Bind the text content of *element*, rendering the current choice statically."""
    element.text = when_true if binding.initial else when_false
    element.set(bind_attribute_name("text"), binding.choice_expression(when_true, when_false))
