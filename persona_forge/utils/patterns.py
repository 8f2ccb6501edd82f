from collections import Counter
from datetime import date
from typing import Any

from persona_forge.models import Post


def compute_posting_patterns(posts: list[Post]) -> dict[str, Any]:
    """Count posts per weekday and per month from their ISO dates."""
    days: Counter = Counter()
    months: Counter = Counter()
    for p in posts:
        if not p.date:
            continue
        d = date.fromisoformat(p.date)
        days[d.strftime("%A")] += 1
        months[d.strftime("%B")] += 1
    return {"peak_days": dict(days), "peak_months": dict(months)}
