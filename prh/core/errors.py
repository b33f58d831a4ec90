"""Error codes for CLI exit status.

Hooks are invoked by git, which only looks at zero versus non-zero, but the
distinct values let CI scripts tell a broken environment apart from a
release-configuration problem.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for prh commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error or aborted operation
    - 2: Environment error (no workspace, unreadable config)
    - 3: Release configuration problems were found
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    RELEASE_CONFIG_ERROR = 3
