from enum import Enum


class Direction(str, Enum):
    ascending = "ascending"
    descending = "descending"
