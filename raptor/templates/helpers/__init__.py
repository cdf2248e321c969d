"""Template helpers.

Each module in this package declares built-in helpers with the
@builtin_helper decorator:

- text: upper, lower, truncate
- formatting: date, currency

Import this package to declare all built-ins. Every HelperRegistry created
afterwards starts with them.
"""

from raptor.templates.helpers.registry import (
    HelperDefinition,
    HelperRegistry,
    builtin_helper,
    builtin_helpers,
)

# Import helper modules to trigger registration (noqa: F401 for side-effect imports)
from raptor.templates.helpers import (  # noqa: F401, E402
    formatting,
    text,
)

__all__ = [
    "HelperDefinition",
    "HelperRegistry",
    "builtin_helper",
    "builtin_helpers",
]
