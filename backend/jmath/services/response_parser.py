import json
import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

FENCED_JSON_PATTERN = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)


def extract_json(text: Optional[str]) -> Optional[Any]:
    """
    Pull a JSON value out of model output.

    A ```json fenced block wins when present; a fence whose content does not
    parse is a failure, not a cue to try the whole text. Without a usable
    fence the whole text is parsed. Returns None when nothing parses.
    """
    if not text:
        return None

    match = FENCED_JSON_PATTERN.search(text)
    if match and match.group(1):
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse fenced JSON block: {str(e)}")
            return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        # plain text is an expected outcome here
        return None
