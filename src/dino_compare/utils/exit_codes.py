"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success
  1   Violation: profile rejected by the validation gate, document fails schema
  2   Error: usage error, unreadable data source, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
