"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class LocateStatus(str, Enum):
    OK = "ok"
    INVALID_ADDRESS = "invalid_address"
    NOT_FOUND = "not_found"
    NO_BRANCHES = "no_branches"
