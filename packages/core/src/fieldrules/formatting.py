"""
Error construction and ``#{key}`` message templating.

When a rule fails, the formatter snapshots the rule descriptor's own
fields, overlays ``field`` and ``class`` and then the validation
context (context wins), and renders the code and message from that
dictionary.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping, Set
from typing import TYPE_CHECKING, Any

from .metadata import FieldDescriptor, descriptor_fields

if TYPE_CHECKING:
    from .messages import MessageCatalog
    from .metadata import Validate
    from .resolver import ValueResolver

logger = logging.getLogger("fieldrules.formatting")

DATE_FORMAT = "%d%m%Y"


def display_value(value: Any) -> str | None:
    """
    Display form of *value* for templating, or ``None`` if it has none.

    - dates and datetimes render as day-month-year (``27092016``);
    - ``None`` renders as an empty string;
    - lists, tuples, sets and mappings have no display form;
    - objects render through ``__str__`` only when their type defines one.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, datetime.date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, list | tuple | Set | Mapping):
        return None
    if isinstance(value, int | float | complex):
        return str(value)
    if type(value).__str__ is object.__str__:
        return None
    return str(value)


def render_template(template: str, params: Mapping[str, Any]) -> str:
    """Replace every ``#{key}`` in *template* with the display form of ``params[key]``.

    Keys whose value has no display form leave their marker untouched.
    """
    rendered = template
    for key, value in params.items():
        marker = f"#{{{key}}}"
        if marker not in rendered:
            continue
        text = display_value(value)
        if text is None:
            logger.debug("Leaving %s unsubstituted: %s has no display form", marker, type(value).__name__)
            continue
        rendered = rendered.replace(marker, text)
    return rendered


class ErrorFormatter:
    """Builds the error record for a failed rule."""

    def __init__(self, catalog: MessageCatalog, resolver: ValueResolver) -> None:
        self._catalog = catalog
        self._resolver = resolver

    def template_params(
        self,
        rule: Validate,
        field: FieldDescriptor,
        owner_type: type,
        args: Mapping[str, Any],
    ) -> dict[str, Any]:
        rule_type = type(rule)
        params: dict[str, Any] = {
            name: self._resolver.resolve(
                FieldDescriptor.create(name, rule_type), rule_type, rule
            )
            for name in descriptor_fields(rule)
        }
        params["field"] = field.name
        params["class"] = owner_type.__name__
        params.update(args)
        return params

    def build_error(
        self,
        rule: Validate,
        field: FieldDescriptor,
        owner_type: type,
        args: Mapping[str, Any],
    ) -> Any:
        params = self.template_params(rule, field, owner_type, args)
        code = render_template(rule.code, params)
        message = self._catalog.get(code, rule.message)
        message = render_template(message, params)
        return rule.errors(code, message, params)
