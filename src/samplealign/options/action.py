from __future__ import annotations

from enum import Enum


class Action(Enum):
    SAMPLES = "samples"
    QNORM = "qnorm"
