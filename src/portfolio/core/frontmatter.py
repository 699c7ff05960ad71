from typing import Any

import yaml

from portfolio.core.errors import FrontmatterError

_DELIMITER = "---"


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a document into its YAML front-matter mapping and the remaining body.

    The document must open with a ``---`` line; the block ends at the next line
    that is exactly ``---``. An empty block yields an empty mapping.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        raise FrontmatterError("document does not start with a front-matter block")

    for i in range(1, len(lines)):
        if lines[i].strip() == _DELIMITER:
            block = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            break
    else:
        raise FrontmatterError("front-matter block is not terminated")

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"invalid YAML in front matter: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError(f"front matter must be a mapping, got {type(data).__name__}")
    return data, body
