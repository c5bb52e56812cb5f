from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass
class QueryContext:
    """
    Shared pipeline context.
    Carries the input file, the two names to query and run bookkeeping.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    names: Optional[Tuple[str, str]] = None

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
