"""Process exit codes for the podlint CLI.

A failed ``which pod`` probe exits with the probe's own exit code.
"""

EXIT_SUCCESS = 0
EXIT_ISSUES_FOUND = 1
EXIT_INVALID_USAGE = 3
