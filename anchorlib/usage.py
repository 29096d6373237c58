"""
usage string function
"""

import os
import sys
from anchorlib.version import VERSION
from anchorlib.prefs import Prefs

PROGNAME = os.path.basename(sys.argv[0])

def usage(message=None):
    """Print usage string, preceded by optional message"""
    if message:
        print(message)
    print("""
{0} version {1}
Print the currently valid DNSSEC root zone trust anchors.

    Usage: {0} [Options]

     Options:
     -v: increase verbosity level by 1 (default 0)
     -j: print JSON encoded output
     -k: print DNSKEY records instead of DS records
     -a: print both DS and DNSKEY records
     -t <time>: evaluate validity at given RFC 3339 time (default: now)
     -f <file>: read trust anchors from file instead of built-in data
     -l <ttl>: TTL of printed records (default: {2})
    """.format(PROGNAME, VERSION, Prefs.TTL))
    sys.exit(2)
