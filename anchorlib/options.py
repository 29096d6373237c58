"""
Command line option processing.
"""


import getopt

from anchorlib.prefs import Prefs
from anchorlib.usage import usage
from anchorlib.anchor import parse_timestamp


def process_args(arguments):
    """Process all command line arguments"""

    try:
        (options, args) = getopt.getopt(arguments, 'vjkat:f:l:')
    except getopt.GetoptError:
        usage()

    if args:
        usage()

    for (opt, optval) in options:
        if opt == "-v":
            Prefs.VERBOSE += 1
        elif opt == "-j":
            Prefs.JSON = True
        elif opt == "-k":
            Prefs.DS = False
            Prefs.DNSKEY = True
        elif opt == "-a":
            Prefs.DS = True
            Prefs.DNSKEY = True
        elif opt == "-t":
            Prefs.TIME = parse_timestamp(optval)
            if Prefs.TIME is None:
                usage("ERROR: invalid time: {}".format(optval))
        elif opt == "-f":
            Prefs.ANCHORFILE = optval
        elif opt == "-l":
            try:
                Prefs.TTL = int(optval)
            except ValueError:
                usage("ERROR: invalid TTL: {}".format(optval))
            if Prefs.TTL < 0:
                usage("ERROR: TTL must be >= 0")
