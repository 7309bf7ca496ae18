"""Regular expression identifier patterns."""

import re
from typing import Pattern


class CaseInsensitivePatternBuilder:
    """Builds anchored, case-insensitive patterns for identifier lookups.

    The value is escaped, so characters such as ``.`` or ``+`` in email
    addresses match literally. The ``^``/``$`` anchors keep the pattern
    usable by stores with POSIX-style regex operators.
    """

    def case_insensitive_exact(self, value: str) -> Pattern[str]:
        return re.compile(f"^{re.escape(value)}$", re.IGNORECASE)
