"""HTML page shell shared by every component showcase.

Templates use str.format() with named placeholders, so literal CSS
braces are doubled.
"""

from __future__ import annotations

from figma_export.tokens import DesignTokens

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="uk">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{
      font-family: {font_family};
      font-size: {font_size};
      line-height: {line_height};
      padding: 2rem;
      background: #f5f5f5;
    }}
    .component-showcase {{
      display: grid;
      gap: 2rem;
      max-width: 1200px;
    }}
    .component-group {{
      background: white;
      padding: 2rem;
      border-radius: 8px;
      box-shadow: 0 2px 4px rgba(0,0,0,0.1);
    }}
    .component-title {{
      font-size: 1.25rem;
      font-weight: 700;
      margin-bottom: 1rem;
      color: {heading_color};
    }}
    .component-items {{
      display: flex;
      flex-wrap: wrap;
      gap: 1rem;
      align-items: center;
    }}
  </style>
</head>
<body>
  <h1 style="margin-bottom: 2rem; color: {heading_color};">{heading} - WordPress Components</h1>
  <div class="component-showcase">
    {content}
  </div>
</body>
</html>"""


def wrap_page(fragment: str, title: str, tokens: DesignTokens) -> str:
    """Place a category fragment inside the full showcase page.

    ``title`` is used as-is for ``<title>`` and upper-cased for the
    visible heading.
    """
    typography = tokens.typography
    return PAGE_TEMPLATE.format(
        title=title,
        heading=title.upper(),
        font_family=typography.font_family["base"],
        font_size=typography.font_size["base"],
        line_height=typography.line_height["base"],
        heading_color=tokens.colors["dark"],
        content=fragment,
    )
