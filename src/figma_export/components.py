"""Component showcase fragments, one renderer per category.

Every renderer is a pure function of the token table and returns the
inner markup of a showcase page. Styles are inlined with literal token
values (no CSS variables) because html.to.design only picks up computed
inline styles.
"""

from __future__ import annotations

from typing import Callable

from figma_export.templates import wrap_page
from figma_export.tokens import DesignTokens


# ── Buttons ──────────────────────────────────────────────────────────


def _button_style(tokens: DesignTokens, bg_color: str, text_color: str = "#ffffff") -> str:
    return f"""
      display: inline-block;
      padding: 0.375rem 0.75rem;
      font-size: 1rem;
      font-weight: 400;
      line-height: 1.5;
      text-align: center;
      text-decoration: none;
      border: 1px solid transparent;
      border-radius: {tokens.border_radius["base"]};
      background-color: {bg_color};
      color: {text_color};
      cursor: pointer;
      transition: all 0.15s ease-in-out;
    """.strip()


def _outline_button(tokens: DesignTokens, color: str, label: str) -> str:
    return f"""<button style="
          padding: 0.375rem 0.75rem;
          font-size: 1rem;
          border: 1px solid {color};
          border-radius: {tokens.border_radius["base"]};
          background-color: transparent;
          color: {color};
          cursor: pointer;
        ">{label}</button>"""


def render_buttons(tokens: DesignTokens) -> str:
    """Primary sizes, contextual variants and outline buttons."""
    colors = tokens.colors
    primary = _button_style(tokens, colors["primary"])
    return f"""
    <div class="component-group">
      <h2 class="component-title">Кнопки - Primary</h2>
      <div class="component-items">
        <button style="{primary}">Primary Button</button>
        <button style="{primary}; padding: 0.5rem 1rem; font-size: 1.25rem;">Large Button</button>
        <button style="{primary}; padding: 0.25rem 0.5rem; font-size: 0.875rem;">Small Button</button>
      </div>
    </div>

    <div class="component-group">
      <h2 class="component-title">Кнопки - Secondary &amp; Variants</h2>
      <div class="component-items">
        <button style="{_button_style(tokens, colors["secondary"])}">Secondary</button>
        <button style="{_button_style(tokens, colors["success"])}">Success</button>
        <button style="{_button_style(tokens, colors["danger"])}">Danger</button>
        <button style="{_button_style(tokens, colors["warning"], colors["dark"])}">Warning</button>
        <button style="{_button_style(tokens, colors["info"])}">Info</button>
      </div>
    </div>

    <div class="component-group">
      <h2 class="component-title">Кнопки - Outline</h2>
      <div class="component-items">
        {_outline_button(tokens, colors["primary"], "Primary Outline")}
        {_outline_button(tokens, colors["secondary"], "Secondary Outline")}
      </div>
    </div>
    """


# ── Forms ────────────────────────────────────────────────────────────


def _field_style(tokens: DesignTokens, extra: str = "") -> str:
    return f"""
          padding: 0.375rem 0.75rem;
          font-size: 1rem;
          line-height: 1.5;
          border: 1px solid #ced4da;
          border-radius: {tokens.border_radius["base"]};
          width: 100%;{extra}
        """


def render_forms(tokens: DesignTokens) -> str:
    """Text inputs, textarea, select, checkbox and radios."""
    field_style = _field_style(tokens)
    textarea_style = _field_style(tokens, "\n          resize: vertical;")
    return f"""
    <div class="component-group">
      <h2 class="component-title">Input Fields</h2>
      <div style="display: flex; flex-direction: column; gap: 1rem; max-width: 400px;">
        <input type="text" placeholder="Text Input" style="{field_style}"/>
        <input type="email" placeholder="Email Input" style="{field_style}"/>
        <textarea placeholder="Textarea" rows="3" style="{textarea_style}"></textarea>
      </div>
    </div>

    <div class="component-group">
      <h2 class="component-title">Select &amp; Checkboxes</h2>
      <div style="display: flex; flex-direction: column; gap: 1rem; max-width: 400px;">
        <select style="{field_style}">
          <option>Оберіть опцію</option>
          <option>Опція 1</option>
          <option>Опція 2</option>
        </select>

        <div style="display: flex; align-items: center; gap: 0.5rem;">
          <input type="checkbox" id="check1" style="width: 1rem; height: 1rem;"/>
          <label for="check1">Checkbox Option</label>
        </div>

        <div style="display: flex; align-items: center; gap: 0.5rem;">
          <input type="radio" id="radio1" name="radio" style="width: 1rem; height: 1rem;"/>
          <label for="radio1">Radio Option 1</label>
        </div>
        <div style="display: flex; align-items: center; gap: 0.5rem;">
          <input type="radio" id="radio2" name="radio" style="width: 1rem; height: 1rem;"/>
          <label for="radio2">Radio Option 2</label>
        </div>
      </div>
    </div>
    """


# ── Typography ───────────────────────────────────────────────────────


def render_typography(tokens: DesignTokens) -> str:
    """Heading scale and body text samples."""
    typo = tokens.typography
    bold = typo.font_weight["bold"]
    tight = typo.line_height["tight"]
    headings = "\n".join(
        f'        <h{level} style="font-size: {typo.font_size[f"h{level}"]}; '
        f'font-weight: {bold}; line-height: {tight};">Heading {level}</h{level}>'
        for level in range(1, 7)
    )
    return f"""
    <div class="component-group">
      <h2 class="component-title">Заголовки</h2>
      <div style="display: flex; flex-direction: column; gap: 0.5rem;">
{headings}
      </div>
    </div>

    <div class="component-group">
      <h2 class="component-title">Текст</h2>
      <div style="display: flex; flex-direction: column; gap: 1rem; max-width: 600px;">
        <p style="font-size: {typo.font_size["base"]}; line-height: {typo.line_height["base"]};">
          Це звичайний параграф тексту. Lorem ipsum dolor sit amet, consectetur adipiscing elit.
        </p>
        <p style="font-size: {typo.font_size["small"]}; line-height: {typo.line_height["base"]}; color: {tokens.colors["secondary"]};">
          Дрібний текст для допоміжної інформації.
        </p>
        <p style="font-weight: {bold};">
          Жирний текст для акцентування уваги.
        </p>
      </div>
    </div>
    """


# ── Cards ────────────────────────────────────────────────────────────


def render_cards(tokens: DesignTokens) -> str:
    """Image card and text-only card."""
    colors = tokens.colors
    bold = tokens.typography.font_weight["bold"]
    radius = tokens.border_radius["base"]
    card_style = f"""
      border: 1px solid rgba(0,0,0,.125);
      border-radius: {radius};
      background: white;
      overflow: hidden;
      box-shadow: {tokens.shadows["sm"]};
    """
    return f"""
    <div class="component-group">
      <h2 class="component-title">Cards</h2>
      <div style="display: grid; grid-template-columns: repeat(auto-fill, minmax(300px, 1fr)); gap: 1.5rem;">
        <div style="{card_style}">
          <div style="height: 180px; background: linear-gradient(135deg, {colors["primary"]} 0%, {colors["info"]} 100%);"></div>
          <div style="padding: 1.25rem;">
            <h3 style="font-size: 1.25rem; font-weight: {bold}; margin-bottom: 0.75rem;">Card Title</h3>
            <p style="color: {colors["secondary"]}; margin-bottom: 1rem;">
              Some quick example text to build on the card title and make up the bulk of the card's content.
            </p>
            <button style="
              padding: 0.375rem 0.75rem;
              background: {colors["primary"]};
              color: white;
              border: none;
              border-radius: {radius};
              cursor: pointer;
            ">Learn More</button>
          </div>
        </div>

        <div style="{card_style}">
          <div style="padding: 1.25rem;">
            <h3 style="font-size: 1.25rem; font-weight: {bold}; margin-bottom: 0.75rem;">Simple Card</h3>
            <p style="color: {colors["secondary"]};">
              Card without image. Perfect for text-only content.
            </p>
          </div>
        </div>
      </div>
    </div>
    """


# ── Navigation ───────────────────────────────────────────────────────


def render_navigation(tokens: DesignTokens) -> str:
    """Dark navbar and breadcrumbs."""
    colors = tokens.colors
    radius = tokens.border_radius["base"]
    muted_links = "\n".join(
        f'            <a href="#" style="color: rgba(255,255,255,0.7); text-decoration: none;">{label}</a>'
        for label in ("About", "Services", "Contact")
    )
    separator = f'<span style="margin: 0 0.5rem; color: {colors["secondary"]};">/</span>'
    return f"""
    <div class="component-group">
      <h2 class="component-title">Navigation</h2>
      <nav style="
        background: {colors["dark"]};
        padding: 1rem;
        border-radius: {radius};
      ">
        <div style="display: flex; align-items: center; gap: 2rem;">
          <a href="#" style="
            color: white;
            text-decoration: none;
            font-weight: {tokens.typography.font_weight["bold"]};
            font-size: 1.25rem;
          ">Logo</a>
          <div style="display: flex; gap: 1rem;">
            <a href="#" style="color: white; text-decoration: none;">Home</a>
{muted_links}
          </div>
        </div>
      </nav>
    </div>

    <div class="component-group">
      <h2 class="component-title">Breadcrumbs</h2>
      <nav style="
        padding: 0.75rem 1rem;
        background: {colors["light"]};
        border-radius: {radius};
      ">
        <a href="#" style="color: {colors["primary"]}; text-decoration: none;">Home</a>
        {separator}
        <a href="#" style="color: {colors["primary"]}; text-decoration: none;">Category</a>
        {separator}
        <span style="color: {colors["secondary"]};">Current Page</span>
      </nav>
    </div>
    """


# ── Dispatch ─────────────────────────────────────────────────────────

RENDERERS: dict[str, Callable[[DesignTokens], str]] = {
    "buttons": render_buttons,
    "forms": render_forms,
    "typography": render_typography,
    "cards": render_cards,
    "navigation": render_navigation,
}


def render_category(category: str, tokens: DesignTokens) -> str:
    """Render the inner fragment for one category.

    Raises:
        KeyError: If ``category`` is not one of CATEGORIES.
    """
    return RENDERERS[category](tokens)


def render_page(category: str, tokens: DesignTokens) -> str:
    """Render a category as a complete standalone HTML document."""
    return wrap_page(render_category(category, tokens), category, tokens)
