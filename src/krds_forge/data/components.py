"""
KRDS component catalog.

Maps each component id to the descriptor fields the template synthesizer
consumes: CSS class root, category, reference HTML file and the variant
files it knows about.
"""

from __future__ import annotations

from typing import Any

COMPONENT_MAPPING: dict[str, dict[str, Any]] = {
    # Action
    "button": {
        "htmlFile": "button.html",
        "variants": ["button_size.html", "button_state.html"],
        "className": "krds-btn",
        "category": "action",
    },
    "link": {
        "htmlFile": "link.html",
        "variants": ["link_state.html"],
        "className": "krds-link",
        "category": "action",
    },
    # Input
    "text-input": {
        "htmlFile": "text_input.html",
        "variants": ["text_input_state.html", "text_input_size.html"],
        "className": "krds-input",
        "category": "input",
        "structure": "fieldset",
    },
    "checkbox": {
        "htmlFile": "checkbox.html",
        "variants": ["checkbox_state.html"],
        "className": "krds-checkbox",
        "category": "input",
    },
    "radio": {
        "htmlFile": "radio.html",
        "variants": ["radio_state.html"],
        "className": "krds-radio",
        "category": "input",
    },
    "select": {
        "htmlFile": "select.html",
        "variants": ["select_state.html"],
        "className": "krds-select",
        "category": "input",
    },
    "textarea": {
        "htmlFile": "textarea.html",
        "variants": ["textarea_state.html"],
        "className": "krds-textarea",
        "category": "input",
        "structure": "fieldset",
    },
    "toggle-switch": {
        "htmlFile": "toggle_switch.html",
        "variants": ["toggle_switch_size.html"],
        "className": "krds-toggle",
        "category": "input",
    },
    # Navigation
    "navigation": {
        "htmlFile": "nav.html",
        "variants": ["nav_vertical.html", "nav_horizontal.html"],
        "className": "krds-nav",
        "category": "navigation",
    },
    "breadcrumb": {
        "htmlFile": "breadcrumb.html",
        "className": "krds-breadcrumb",
        "category": "navigation",
    },
    "pagination": {
        "htmlFile": "pagination.html",
        "className": "krds-pagination",
        "category": "navigation",
    },
    "tab": {
        "htmlFile": "tab.html",
        "variants": ["tab_vertical.html"],
        "className": "krds-tab",
        "category": "navigation",
    },
    # Feedback
    "alert": {
        "htmlFile": "alert.html",
        "variants": ["alert_type.html"],
        "className": "krds-alert",
        "category": "feedback",
    },
    "toast": {
        "htmlFile": "toast.html",
        "className": "krds-toast",
        "category": "feedback",
    },
    "loading": {
        "htmlFile": "loading.html",
        "variants": ["loading_spinner.html"],
        "className": "krds-loading",
        "category": "feedback",
    },
    # Layout
    "card": {
        "htmlFile": "card.html",
        "variants": ["card_type.html"],
        "className": "krds-card",
        "category": "layout",
    },
    "modal": {
        "htmlFile": "modal.html",
        "variants": ["modal_size.html"],
        "className": "krds-modal",
        "category": "layout",
    },
    "accordion": {
        "htmlFile": "accordion.html",
        "className": "krds-accordion",
        "category": "layout",
    },
    "dropdown": {
        "htmlFile": "dropdown.html",
        "className": "krds-dropdown",
        "category": "layout",
    },
    # Content
    "table": {
        "htmlFile": "table.html",
        "variants": ["table_type.html"],
        "className": "krds-table",
        "category": "content",
    },
    "list": {
        "htmlFile": "list.html",
        "variants": ["list_type.html"],
        "className": "krds-list",
        "category": "content",
    },
}
