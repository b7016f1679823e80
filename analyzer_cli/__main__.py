"""
Entry point: `python -m analyzer_cli` or the `analyzer` console script.

parse → report faults → set up logging → dispatch → exit status.
"""
import sys

from .args import parse
from .config import LOG_VARIABLE
from .dispatch import run
from .faults import CommandException, ConfigurationError, trigger
from .logger import setup_logging
from .utils import Unset


def main(prompt=Unset, /):
    """
    Run the front end once and return the process exit status.

    Faults are printed as one line on stderr and turn into status 1; help and
    version output are not failures.
    """
    try:
        invocation = parse(prompt)
        try:
            setup_logging(invocation.verbosity, invocation.log_file)
        except (OSError, ValueError) as error:
            raise ConfigurationError(
                str(error),
                hint="check --log-file and the %s variable" % LOG_VARIABLE,
            ) from error
        run(invocation)
    except CommandException as fault:
        trigger(fault, shell=True, deferred=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
