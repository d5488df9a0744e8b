from enum import Enum


class ExplainMode(str, Enum):
    analyze = "analyze"
