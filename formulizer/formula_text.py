from __future__ import annotations

import re
from typing import List, Optional

GLOBAL_VARIABLE_PATTERN = re.compile(r'\$([a-zA-Z]+)')


def extract_global_variables(formula: Optional[str]) -> List[str]:
    """Names of $-prefixed global variables in formula text, in order, duplicates kept.

    Only the leading run of ASCII letters is taken: '$User.Name' yields 'User'.
    """
    if not formula:
        return []
    return GLOBAL_VARIABLE_PATTERN.findall(formula)
