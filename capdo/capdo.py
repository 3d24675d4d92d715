"""
capdo
=====

The main entry point for rendering bootstrap user-data.
Don't use it directly, instead install the package with setup.py.
It automatically creates an executable in your path.

"""
import argparse
import sys

from mach import mach1

from . import __version__
from .cli import build_userdata, write_userdata, ROLES
from .provision.userdata import UserdataError
from .util.logger import Logger

LOGGER = Logger(__name__)


@mach1()
class Capdo:  # pylint: disable=no-self-use
    """
    The main entry point for the program. This class does the CLI parsing
    and decides which action should be taken
    """
    def __init__(self):
        self.parser.add_argument(  # pylint: disable=no-member
            "--version", action="store_true",
            help="show version and exit",
            default=argparse.SUPPRESS)

        verbosity_help = "".join([
            "set the verbosity level (",
            "0 = quiet, ",
            "1 = error, ",
            "2 = warning, ",
            "3 = info, ",
            "4 = debug)"])
        self.parser.add_argument("--verbosity",  # pylint: disable=no-member
                                 "-v",
                                 help=verbosity_help,
                                 choices=['0', '1', '2', '3', '4', 'quiet',
                                          'error', 'warning', 'info', 'debug'],
                                 type=str,
                                 default='3')

    def _get_version(self, _show=True):
        print("%s version: %s" % (self.__class__.__name__, __version__))
        sys.exit(0)

    def _set_verbosity(self, level):  # pylint: disable=no-self-use
        Logger.set_global_level(level)

    # pylint: disable=too-many-arguments
    def userdata(self, machine: str, cluster: str = "", token: str = "",
                 metadata: str = "", output: str = "", role: str = "auto"):
        """
        Render the bootstrap script of a machine

        machine - the Machine manifest (YAML)
        cluster - the Cluster manifest (YAML) the machine belongs to
        token - the join token of the machine
        metadata - a script appended to the environment
        output - write the script to this file instead of STDOUT
        role - one of auto, control-plane or worker
        """
        if not (cluster and token):
            LOGGER.error("Must specify --cluster and --token")
            sys.exit(1)

        try:
            script = build_userdata(cluster, machine, token,
                                    metadata_path=metadata, role=role)
        except (UserdataError, ValueError, OSError) as err:
            LOGGER.error(f"Error: {err}")
            sys.exit(1)

        if output:
            write_userdata(script, output)
        else:
            sys.stdout.write(script)

    def roles(self):
        """
        List the roles a bootstrap script can be rendered for
        """
        for role in ROLES:
            print(role)


def main():
    """
    run and execute capdo
    """
    k = Capdo()

    # pylint: disable=no-member
    k.parser.description = 'Render bootstrap user-data for Cluster API '\
                           'machines from their Cluster and Machine '\
                           'manifests.'

    # the mach decorator analyzes the methods in the class and dynamically
    # creates the CLI parser. It also adds the method run to the class.
    # Top level options are handed to _get_<option> or _set_<option>.
    k.run()  # pylint: disable=no-member
