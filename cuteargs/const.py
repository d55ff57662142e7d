VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "A small state-keyed command-line option matcher with typed value decoding"

EXTRA_ARGS_ENV = "CUTEARGS_EXTRA_ARGS"
