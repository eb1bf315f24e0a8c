"""Process exit codes reported to the invoking build system."""

EXIT_SUCCESS = 0
EXIT_MISSING_FILENAME = 1   # no output path on the command line
EXIT_OUTPUT_FILE = 2        # output path could not be opened or written
