"""Design asset export — design tokens and HTML component showcases.

Generates a Figma Tokens JSON document and five self-contained HTML
pages (buttons, forms, typography, cards, navigation) from a constant
token table. The pages carry inline styles only, so they can be dropped
into html.to.design without any external assets.

Output layout (relative to the output root):
    tokens/design-tokens.json
    components/<category>.html
"""

CATEGORIES = ("buttons", "forms", "typography", "cards", "navigation")

TOKEN_TYPES = ("color", "fontSize", "spacing", "borderRadius", "boxShadow")

TOKENS_DIRNAME = "tokens"
COMPONENTS_DIRNAME = "components"
TOKENS_FILENAME = "design-tokens.json"


class FigmaExportError(Exception):
    """Base error for recoverable export failures."""


class TokenError(FigmaExportError):
    """Raised when token override data does not match the token table."""


class ConfigError(FigmaExportError):
    """Raised when a config file is malformed."""
