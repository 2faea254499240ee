"""go.mod reader.

Only the module directive is needed: it is the prefix that turns an import
path of the analyzed module into a directory under the root.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

GO_MOD = "go.mod"

# module github.com/acme/app
# module "github.com/acme/app"   // quoted form is legal too
_MODULE_RE = re.compile(r'^\s*module\s+(?:"([^"]+)"|`([^`]+)`|(\S+))')


def parse_module_path(text: str) -> str | None:
    """Module path declared in go.mod contents, None if absent."""
    for line in text.splitlines():
        line = line.split("//", 1)[0]
        match = _MODULE_RE.match(line)
        if match:
            return next(group for group in match.groups() if group)
    return None


def read_module_path(root: Path) -> str | None:
    """Module path of <root>/go.mod.

    Args:
        root: Module root directory

    Returns:
        Module path, or None if go.mod is missing, unreadable or has no
        module directive
    """
    go_mod = root / GO_MOD
    try:
        text = go_mod.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read {go_mod}: {e}")
        return None
    module = parse_module_path(text)
    if module is None:
        logger.warning(f"{go_mod} has no module directive")
    return module
