from __future__ import annotations

import math


def format_elapsed(seconds: float) -> str:
    total_secs = max(0, int(math.floor(seconds)))
    mins, secs = divmod(total_secs, 60)
    hours, mins = divmod(mins, 60)
    days, hours = divmod(hours, 24)
    return f"{days}d {hours}h {mins}m {secs}s"
