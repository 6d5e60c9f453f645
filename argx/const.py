VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "argx"
DESCRIPTION = "A simple command line argument parser"

# Classify the first token like any other. Callers that pass a raw argv
# either slice the program name off or ask for it to be skipped.
SKIP_PROGRAM = False

# A token made only of dashes can never be a value, so it also drops the
# pending option key.
RESET_ON_DASHES = True

EXTRA_ARGS_ENV = "ARGX_EXTRA_ARGS"
