"""
Preferences for the rootanchors program.
"""


class Prefs:
    """Preferences"""
    VERBOSE = 0                      # -v: Verbosity level (0 default)
    JSON = False                     # -j: JSON encoded output
    DS = True                        # print DS records
    DNSKEY = False                   # -k: print DNSKEY records
    ANCHORFILE = None                # -f: read anchors from file
    TIME = None                      # -t: evaluate validity at this time
    TTL = 172800                     # -l: TTL of printed records
