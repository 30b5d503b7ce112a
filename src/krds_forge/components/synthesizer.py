"""
Component template synthesis.

Turns a component descriptor plus an optional variant identifier into an
HTML+CSS pair. Dispatch is by descriptor category; within a category the
component id (or its class root) selects the markup. Unknown categories
and unmapped ids render the generic ``<div>`` template, so dispatch itself
never fails. Builder failures surface as :class:`SynthesisError`, which
:func:`synthesize_or_fallback` turns into the minimal stub template.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from krds_forge.components import css_builders
from krds_forge.components.specs import ComponentCategory, ComponentDescriptor, GeneratedTemplate
from krds_forge.components.variants import VariantResolver, default_resolver
from krds_forge.core.errors import (
    ErrorContext,
    SynthesisError,
    UnknownComponentError,
)

logger = logging.getLogger(__name__)

Builder = Callable[[ComponentDescriptor, str | None, VariantResolver], GeneratedTemplate]

# Category names used by older catalogs
_CATEGORY_ALIASES = {"layout-expression": ComponentCategory.LAYOUT}


def _is(descriptor: ComponentDescriptor, *ids: str, class_name: str | None = None) -> bool:
    """Match a descriptor by component id or by its class root."""
    return descriptor.id in ids or (class_name is not None and descriptor.class_name == class_name)


def _join_classes(*names: str) -> str:
    return " ".join(name for name in names if name)


def _raw_id(descriptor: Any) -> str:
    if isinstance(descriptor, Mapping):
        return str(descriptor.get("id") or "")
    return ""


# =============================================================================
# Generic and fallback
# =============================================================================


def generic_template(descriptor: ComponentDescriptor) -> GeneratedTemplate:
    """Plain ``<div>`` for unknown categories and unmapped ids."""
    cls = descriptor.class_name
    return GeneratedTemplate(
        html=f"""<div class="{cls}">
  <!-- {descriptor.id} component -->
  <span>Component content</span>
</div>""",
        css=css_builders.generic_css(cls),
        variants=[],
    )


def fallback_template(descriptor: Any) -> GeneratedTemplate:
    """
    Minimal stub derived from whatever the descriptor carries.

    Must not raise: works from a validated descriptor, a raw mapping, or
    anything else (which gets the default names).
    """
    if isinstance(descriptor, ComponentDescriptor):
        component_id, cls, category = descriptor.id, descriptor.class_name, descriptor.category
    elif not isinstance(descriptor, Mapping):
        component_id, cls, category = "component", "krds-component", "generic"
    else:
        component_id = str(descriptor.get("id") or "component")
        cls = str(descriptor.get("className") or descriptor.get("class_name") or "krds-component")
        category = str(descriptor.get("category") or "generic")

    return GeneratedTemplate(
        html=f"""<div class="{cls}">
  <!-- {component_id} component -->
  <span>Default {category} component</span>
</div>""",
        css=css_builders.fallback_css(cls),
        variants=[],
    )


# =============================================================================
# Category builders
# =============================================================================


def build_action(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name

    if _is(descriptor, "button", class_name="krds-btn"):
        classes = _join_classes(
            cls, resolver.extract_size(variant), resolver.extract_state(variant)
        )
        return GeneratedTemplate(
            html=f'<button type="button" class="{classes}">Button</button>',
            css=css_builders.button_css(cls),
            variants=["small", "medium", "large", "xlarge", "disabled", "hover", "focus"],
        )

    return GeneratedTemplate(
        html=f'<a href="#" class="{cls}">Link</a>',
        css=css_builders.link_css(cls),
        variants=["visited", "hover", "focus", "active"],
    )


def build_input(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name
    state_attrs = resolver.state_attributes(variant)

    if descriptor.structure == "fieldset":
        if "textarea" in descriptor.id or "textarea" in cls:
            return GeneratedTemplate(
                html=f"""<div class="fieldset">
  <div class="form-group">
    <div class="form-tit">
      <label for="textarea-input">Text area</label>
    </div>
    <div class="form-conts">
      <textarea id="textarea-input" class="{cls}" placeholder="Enter your text"{state_attrs}></textarea>
    </div>
    <p class="form-hint">Text area hint</p>
  </div>
</div>""",
                css=css_builders.textarea_css(cls),
                variants=["readonly", "disabled", "focus", "error"],
            )

        return GeneratedTemplate(
            html=f"""<div class="fieldset">
  <div class="form-group">
    <div class="form-tit">
      <label for="text-input">Text input</label>
    </div>
    <div class="form-conts">
      <input type="text" id="text-input" class="{cls}" placeholder="Enter text"{state_attrs}>
    </div>
    <p class="form-hint">Input hint</p>
  </div>
</div>""",
            css=css_builders.input_css(cls),
            variants=["readonly", "disabled", "focus", "error", "small", "large"],
        )

    if _is(descriptor, "checkbox", class_name="krds-checkbox"):
        return GeneratedTemplate(
            html=f"""<div class="form-check">
  <input type="checkbox" id="checkbox-1" class="{cls}"{state_attrs}>
  <label for="checkbox-1">Checkbox option</label>
</div>""",
            css=css_builders.check_control_css(cls),
            variants=["checked", "disabled", "indeterminate"],
        )

    if _is(descriptor, "radio", class_name="krds-radio"):
        return GeneratedTemplate(
            html=f"""<div class="form-check">
  <input type="radio" id="radio-1" name="radio-group" class="{cls}"{state_attrs}>
  <label for="radio-1">Radio option</label>
</div>""",
            css=css_builders.check_control_css(cls),
            variants=["checked", "disabled"],
        )

    return generic_template(descriptor)


def build_navigation(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name

    if _is(descriptor, "navigation", "nav", class_name="krds-nav"):
        direction = "vertical" if variant and "vertical" in variant else "horizontal"
        items = "\n".join(
            f"""    <li class="krds-nav-item">
      <a href="#" class="krds-nav-link{' active' if index == 2 else ''}">Menu {index}</a>
    </li>"""
            for index in (1, 2, 3)
        )
        return GeneratedTemplate(
            html=f"""<nav class="{cls} {direction}" aria-label="Main navigation">
  <ul class="krds-nav-list">
{items}
  </ul>
</nav>""",
            css=css_builders.nav_css(cls),
            variants=["horizontal", "vertical", "active", "disabled"],
        )

    if _is(descriptor, "breadcrumb", class_name="krds-breadcrumb"):
        return GeneratedTemplate(
            html=f"""<nav class="{cls}" aria-label="breadcrumb">
  <ol class="krds-breadcrumb-list">
    <li class="krds-breadcrumb-item">
      <a href="#" class="krds-breadcrumb-link">Home</a>
    </li>
    <li class="krds-breadcrumb-item">
      <a href="#" class="krds-breadcrumb-link">Category</a>
    </li>
    <li class="krds-breadcrumb-item active" aria-current="page">
      Current page
    </li>
  </ol>
</nav>""",
            css=css_builders.breadcrumb_css(cls),
            variants=["active", "hover"],
        )

    return generic_template(descriptor)


def build_feedback(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name

    if _is(descriptor, "alert", class_name="krds-alert"):
        alert_type = resolver.extract_type(variant) or "info"
        return GeneratedTemplate(
            html=f"""<div class="{cls} {alert_type}" role="alert">
  <div class="krds-alert-content">
    <strong class="krds-alert-title">Notice</strong>
    <p class="krds-alert-message">This is an {alert_type} alert message.</p>
  </div>
  <button type="button" class="krds-alert-close" aria-label="Close alert">
    <span aria-hidden="true">&times;</span>
  </button>
</div>""",
            css=css_builders.alert_css(cls),
            variants=["success", "warning", "error", "info"],
        )

    return generic_template(descriptor)


def build_layout(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name

    if _is(descriptor, "card", class_name="krds-card"):
        return GeneratedTemplate(
            html=f"""<div class="{cls}">
  <div class="krds-card-header">
    <h3 class="krds-card-title">Card title</h3>
  </div>
  <div class="krds-card-body">
    <p class="krds-card-text">Card content goes here.</p>
  </div>
  <div class="krds-card-footer">
    <button type="button" class="krds-btn">Action</button>
  </div>
</div>""",
            css=css_builders.card_css(cls),
            variants=["elevated", "outlined", "filled"],
        )

    if _is(descriptor, "modal", class_name="krds-modal"):
        size = resolver.extract_size(variant) or "medium"
        return GeneratedTemplate(
            html=f"""<div class="krds-modal-overlay">
  <div class="{cls} {size}" role="dialog" aria-labelledby="modal-title" aria-modal="true">
    <div class="krds-modal-header">
      <h2 id="modal-title" class="krds-modal-title">Modal title</h2>
      <button type="button" class="krds-modal-close" aria-label="Close modal">
        <span aria-hidden="true">&times;</span>
      </button>
    </div>
    <div class="krds-modal-body">
      <p>Modal content goes here.</p>
    </div>
    <div class="krds-modal-footer">
      <button type="button" class="krds-btn">Confirm</button>
      <button type="button" class="krds-btn secondary">Cancel</button>
    </div>
  </div>
</div>""",
            css=css_builders.modal_css(cls),
            variants=["small", "medium", "large", "fullscreen"],
        )

    return generic_template(descriptor)


def build_content(
    descriptor: ComponentDescriptor, variant: str | None, resolver: VariantResolver
) -> GeneratedTemplate:
    cls = descriptor.class_name

    if _is(descriptor, "table", class_name="krds-table"):
        rows = "\n".join(
            f"""    <tr>
      <td>{name}</td>
      <td>{age}</td>
      <td>{job}</td>
      <td>
        <button type="button" class="krds-btn small">Edit</button>
      </td>
    </tr>"""
            for name, age, job in (("Hong Gildong", 30, "Developer"), ("Kim Younghee", 25, "Designer"))
        )
        return GeneratedTemplate(
            html=f"""<table class="{cls}">
  <thead class="krds-table-header">
    <tr>
      <th scope="col">Name</th>
      <th scope="col">Age</th>
      <th scope="col">Job</th>
      <th scope="col">Action</th>
    </tr>
  </thead>
  <tbody class="krds-table-body">
{rows}
  </tbody>
</table>""",
            css=css_builders.table_css(cls),
            variants=["striped", "bordered", "hover", "compact"],
        )

    return generic_template(descriptor)


CATEGORY_BUILDERS: dict[ComponentCategory, Builder] = {
    ComponentCategory.ACTION: build_action,
    ComponentCategory.INPUT: build_input,
    ComponentCategory.NAVIGATION: build_navigation,
    ComponentCategory.FEEDBACK: build_feedback,
    ComponentCategory.LAYOUT: build_layout,
    ComponentCategory.CONTENT: build_content,
}


def resolve_category(category: str) -> ComponentCategory | None:
    """Map a descriptor category string onto the enum, None if unknown."""
    if category in _CATEGORY_ALIASES:
        return _CATEGORY_ALIASES[category]
    try:
        return ComponentCategory(category)
    except ValueError:
        return None


# =============================================================================
# Entry points
# =============================================================================


def synthesize(
    descriptor: ComponentDescriptor | Mapping[str, Any] | None,
    variant: str | None = None,
    resolver: VariantResolver = default_resolver,
) -> GeneratedTemplate:
    """
    Synthesize the template for a component.

    Args:
        descriptor: Catalog descriptor, or its wire-form mapping
        variant: Optional variant identifier, e.g. ``button_size_small.html``
        resolver: Facet extractor

    Returns:
        GeneratedTemplate for the descriptor's category

    Raises:
        UnknownComponentError: If no descriptor was supplied
        SynthesisError: If the descriptor is malformed or a builder fails
    """
    if descriptor is None:
        raise UnknownComponentError("No descriptor supplied", ErrorContext(variant=variant))

    if not isinstance(descriptor, ComponentDescriptor):
        try:
            descriptor = ComponentDescriptor.model_validate(descriptor)
        except ValidationError as exc:
            raise SynthesisError(
                f"Malformed component descriptor: {exc.error_count()} error(s)",
                ErrorContext(component_id=_raw_id(descriptor), variant=variant),
            ) from exc

    category = resolve_category(descriptor.category)
    if category is None:
        logger.debug(
            "Component %s has unmapped category %r, using generic template",
            descriptor.id,
            descriptor.category,
        )
        return generic_template(descriptor)

    builder = CATEGORY_BUILDERS[category]
    try:
        return builder(descriptor, variant, resolver)
    except Exception as exc:
        raise SynthesisError(
            f"{category.value} builder failed: {exc}",
            ErrorContext(component_id=descriptor.id, variant=variant),
        ) from exc


def synthesize_or_fallback(
    descriptor: ComponentDescriptor | Mapping[str, Any] | None,
    variant: str | None = None,
    resolver: VariantResolver = default_resolver,
) -> GeneratedTemplate:
    """
    Like :func:`synthesize`, but recovers synthesis failures with the stub template.

    Raises:
        UnknownComponentError: If no descriptor was supplied
    """
    try:
        return synthesize(descriptor, variant, resolver)
    except SynthesisError as exc:
        assert descriptor is not None  # None raises UnknownComponentError above
        logger.warning("Falling back to stub template: %s", exc, exc_info=True)
        return fallback_template(descriptor)
