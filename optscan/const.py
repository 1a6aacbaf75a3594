import os


VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "optscan"
DESCRIPTION = "Split command-line tokens into positional arguments and options"
GLOBAL_OS_DIR = os.path.join(os.path.expanduser("~"), ".optscan")
GLOBAL_LOG_FILE: str = os.path.join(GLOBAL_OS_DIR, "optscan.log")
GRAPH_FILE = "scan.gv"

EXTRA_ARGS_ENV = "OPTSCAN_EXTRA_ARGS"
VERBOSE_ENV = "OPTSCAN_VERBOSE"
