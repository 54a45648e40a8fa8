"""Process exit codes for the ``aoc`` command.

Each failure kind gets its own code so scripts can tell a missing input
apart from a malformed one.  ``USAGE_ERROR`` is the code Click uses for
bad arguments.
"""

SUCCESS: int = 0
SOLUTION_ERROR: int = 1
USAGE_ERROR: int = 2
INPUT_NOT_FOUND: int = 3
MISSING_DEFAULT_INPUT: int = 4
INPUT_UNREADABLE: int = 5
UNKNOWN_DAY: int = 6
PARSE_FAILURE: int = 7
