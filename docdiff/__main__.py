import sys

from docdiff.cli import main_cli

sys.exit(main_cli())
