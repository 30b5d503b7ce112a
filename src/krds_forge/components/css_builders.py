"""
Per-component CSS builders.

Every rule references design-token custom properties (``var(--krds-...)``)
rather than literal values, so the output only renders correctly alongside
a stylesheet from :mod:`krds_forge.themes.css_generator`.
"""

from __future__ import annotations


def button_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  display: inline-flex;
  align-items: center;
  justify-content: center;
  height: var(--krds-component-button-height-md);
  padding: 0 var(--krds-component-button-padding-x-md);
  border: var(--krds-component-button-border-width) solid var(--krds-light-color-primary-border-default);
  border-radius: var(--krds-component-button-border-radius);
  background-color: var(--krds-light-color-primary-background-default);
  color: var(--krds-light-color-primary-text-default);
  font-size: var(--krds-typography-font-size-base);
  font-weight: var(--krds-typography-font-weight-medium);
  text-decoration: none;
  cursor: pointer;
  transition: var(--krds-motion-transition-colors);
}}

.{cls}:hover {{
  background-color: var(--krds-light-color-primary-background-hover);
  border-color: var(--krds-light-color-primary-border-hover);
}}

.{cls}:focus {{
  outline: none;
  box-shadow: var(--krds-shadow-focus-primary);
}}

.{cls}:disabled {{
  background-color: var(--krds-light-color-primary-background-disabled);
  color: var(--krds-light-color-primary-text-disabled);
  cursor: not-allowed;
}}

.{cls}.small {{
  height: var(--krds-component-button-height-sm);
  padding: 0 var(--krds-component-button-padding-x-sm);
  font-size: var(--krds-typography-font-size-sm);
}}

.{cls}.large {{
  height: var(--krds-component-button-height-lg);
  padding: 0 var(--krds-component-button-padding-x-lg);
  font-size: var(--krds-typography-font-size-lg);
}}"""


def link_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  color: var(--krds-light-color-interactive-text-default);
  text-decoration: underline;
  cursor: pointer;
  transition: var(--krds-motion-transition-colors);
}}

.{cls}:hover {{
  color: var(--krds-light-color-interactive-text-hover);
}}

.{cls}:visited {{
  color: var(--krds-light-color-interactive-text-visited);
}}"""


def input_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  width: 100%;
  height: var(--krds-component-input-height-md);
  padding: 0 var(--krds-component-input-padding-x);
  border: var(--krds-component-input-border-width) solid var(--krds-light-color-neutral-border-default);
  border-radius: var(--krds-component-input-border-radius);
  background-color: var(--krds-light-color-neutral-background-default);
  color: var(--krds-light-color-neutral-text-primary);
  font-size: var(--krds-typography-font-size-base);
  transition: var(--krds-motion-transition-colors);
}}

.{cls}:focus {{
  outline: none;
  border-color: var(--krds-light-color-primary-border-focus);
  box-shadow: var(--krds-shadow-focus-primary);
}}

.{cls}:disabled {{
  background-color: var(--krds-light-color-neutral-background-tertiary);
  color: var(--krds-light-color-neutral-text-disabled);
  cursor: not-allowed;
}}"""


def textarea_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  width: 100%;
  min-height: 120px;
  padding: var(--krds-component-input-padding-x);
  border: var(--krds-component-input-border-width) solid var(--krds-light-color-neutral-border-default);
  border-radius: var(--krds-component-input-border-radius);
  background-color: var(--krds-light-color-neutral-background-default);
  color: var(--krds-light-color-neutral-text-primary);
  font-size: var(--krds-typography-font-size-base);
  font-family: var(--krds-typography-font-family-primary);
  resize: vertical;
  transition: var(--krds-motion-transition-colors);
}}

.{cls}:focus {{
  outline: none;
  border-color: var(--krds-light-color-primary-border-focus);
  box-shadow: var(--krds-shadow-focus-primary);
}}"""


def check_control_css(cls: str) -> str:
    """Checkbox and radio share the same box."""
    return f"""/* {cls} styles */
.{cls} {{
  width: 16px;
  height: 16px;
  margin-right: var(--krds-spacing-2);
  cursor: pointer;
}}"""


def nav_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  display: flex;
}}

.{cls}.vertical {{
  flex-direction: column;
}}

.krds-nav-list {{
  display: flex;
  list-style: none;
  margin: 0;
  padding: 0;
}}

.{cls}.vertical .krds-nav-list {{
  flex-direction: column;
}}

.krds-nav-item {{
  margin: 0;
}}

.krds-nav-link {{
  display: block;
  padding: var(--krds-spacing-3) var(--krds-spacing-4);
  color: var(--krds-light-color-interactive-text-default);
  text-decoration: none;
  transition: var(--krds-motion-transition-colors);
}}

.krds-nav-link:hover {{
  background-color: var(--krds-light-color-interactive-background-hover);
  color: var(--krds-light-color-interactive-text-hover);
}}

.krds-nav-link.active {{
  background-color: var(--krds-light-color-interactive-background-selected);
  font-weight: var(--krds-typography-font-weight-semibold);
}}"""


def breadcrumb_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  display: block;
}}

.krds-breadcrumb-list {{
  display: flex;
  list-style: none;
  margin: 0;
  padding: 0;
}}

.krds-breadcrumb-item {{
  display: flex;
  align-items: center;
}}

.krds-breadcrumb-item:not(:last-child)::after {{
  content: "/";
  margin: 0 var(--krds-spacing-2);
  color: var(--krds-light-color-neutral-text-tertiary);
}}

.krds-breadcrumb-link {{
  color: var(--krds-light-color-interactive-text-default);
  text-decoration: none;
}}

.krds-breadcrumb-link:hover {{
  color: var(--krds-light-color-interactive-text-hover);
  text-decoration: underline;
}}

.krds-breadcrumb-item.active {{
  color: var(--krds-light-color-neutral-text-primary);
}}"""


def alert_css(cls: str) -> str:
    type_rules = "\n\n".join(
        f""".{cls}.{alert_type} {{
  border-color: var(--krds-light-color-{alert_type}-border-default);
  background-color: var(--krds-light-color-{alert_type}-background-light);
  color: var(--krds-light-color-{alert_type}-text-dark);
}}"""
        for alert_type in ("success", "warning", "error", "info")
    )
    return f"""/* {cls} styles */
.{cls} {{
  display: flex;
  align-items: flex-start;
  padding: var(--krds-spacing-4);
  border: 1px solid;
  border-radius: var(--krds-border-radius-base);
  background-color: var(--krds-light-color-neutral-background-secondary);
}}

{type_rules}

.krds-alert-content {{
  flex: 1;
}}

.krds-alert-title {{
  display: block;
  margin-bottom: var(--krds-spacing-2);
  font-weight: var(--krds-typography-font-weight-semibold);
}}

.krds-alert-message {{
  margin: 0;
}}

.krds-alert-close {{
  margin-left: var(--krds-spacing-3);
  padding: 0;
  border: none;
  background: transparent;
  font-size: var(--krds-typography-font-size-lg);
  cursor: pointer;
}}"""


def card_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  display: flex;
  flex-direction: column;
  border: var(--krds-component-card-border-width) solid var(--krds-light-color-neutral-border-default);
  border-radius: var(--krds-component-card-border-radius);
  background-color: var(--krds-light-color-neutral-background-default);
  box-shadow: var(--krds-shadow-sm);
}}

.krds-card-header {{
  padding: var(--krds-component-card-padding);
  border-bottom: 1px solid var(--krds-light-color-neutral-border-default);
}}

.krds-card-title {{
  margin: 0;
  font-size: var(--krds-typography-font-size-lg);
  font-weight: var(--krds-typography-font-weight-semibold);
}}

.krds-card-body {{
  flex: 1;
  padding: var(--krds-component-card-padding);
}}

.krds-card-text {{
  margin: 0;
}}

.krds-card-footer {{
  padding: var(--krds-component-card-padding);
  border-top: 1px solid var(--krds-light-color-neutral-border-default);
}}"""


def modal_css(cls: str) -> str:
    return f"""/* {cls} styles */
.krds-modal-overlay {{
  position: fixed;
  top: 0;
  left: 0;
  right: 0;
  bottom: 0;
  background-color: var(--krds-light-color-neutral-background-overlay);
  display: flex;
  align-items: center;
  justify-content: center;
  z-index: var(--krds-layout-z-index-modal);
}}

.{cls} {{
  width: var(--krds-component-modal-width-md);
  max-width: 90vw;
  max-height: 90vh;
  border-radius: var(--krds-component-modal-border-radius);
  background-color: var(--krds-light-color-neutral-background-default);
  box-shadow: var(--krds-shadow-2xl);
  display: flex;
  flex-direction: column;
}}

.{cls}.small {{
  width: var(--krds-component-modal-width-sm);
}}

.{cls}.large {{
  width: var(--krds-component-modal-width-lg);
}}

.krds-modal-header {{
  display: flex;
  align-items: center;
  justify-content: space-between;
  padding: var(--krds-spacing-6);
  border-bottom: 1px solid var(--krds-light-color-neutral-border-default);
}}

.krds-modal-title {{
  margin: 0;
  font-size: var(--krds-typography-font-size-xl);
  font-weight: var(--krds-typography-font-weight-semibold);
}}

.krds-modal-close {{
  padding: var(--krds-spacing-2);
  border: none;
  background: transparent;
  font-size: var(--krds-typography-font-size-xl);
  cursor: pointer;
}}

.krds-modal-body {{
  flex: 1;
  padding: var(--krds-spacing-6);
  overflow-y: auto;
}}

.krds-modal-footer {{
  display: flex;
  gap: var(--krds-spacing-3);
  justify-content: flex-end;
  padding: var(--krds-spacing-6);
  border-top: 1px solid var(--krds-light-color-neutral-border-default);
}}"""


def table_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  width: 100%;
  border-collapse: collapse;
  border: 1px solid var(--krds-light-color-neutral-border-default);
}}

.{cls} th,
.{cls} td {{
  padding: var(--krds-component-table-cell-padding-y) var(--krds-component-table-cell-padding-x);
  text-align: left;
  border-bottom: 1px solid var(--krds-light-color-neutral-border-default);
}}

.{cls} th {{
  background-color: var(--krds-light-color-neutral-background-secondary);
  font-weight: var(--krds-typography-font-weight-semibold);
  color: var(--krds-light-color-neutral-text-primary);
}}

.{cls} tr:hover td {{
  background-color: var(--krds-light-color-interactive-background-hover);
}}"""


def generic_css(cls: str) -> str:
    return f"""/* {cls} styles */
.{cls} {{
  display: block;
  padding: var(--krds-spacing-4);
}}"""


def fallback_css(cls: str) -> str:
    """Minimal box used by the fallback stub template."""
    return f"""/* {cls} default styles */
.{cls} {{
  display: block;
  padding: var(--krds-spacing-4);
  border: 1px solid var(--krds-light-color-neutral-border-default);
  border-radius: var(--krds-border-radius-base);
}}"""
