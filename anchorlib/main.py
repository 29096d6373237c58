"""
main() function for command line program rootanchors.py
"""


import sys
import dns.exception

from anchorlib.exception import AnchorError
from anchorlib.prefs import Prefs
from anchorlib.options import process_args
from anchorlib.anchor import root_anchors, load_file, utc_now
from anchorlib.store import valid_ds_records, valid_dnskey_records
from anchorlib.output import print_records, jsonout


def main(arguments=None):
    """
    rootanchors.py main() function. Returns 0 if any valid anchor
    was printed, 1 if there was none, and 2 on error.
    """

    if arguments is None:
        arguments = sys.argv[1:]
    process_args(arguments)

    try:
        if Prefs.ANCHORFILE:
            anchors = load_file(Prefs.ANCHORFILE)
        else:
            anchors = root_anchors
    except AnchorError as exc_info:
        print("ERROR:", exc_info)
        return 2

    now = utc_now(Prefs.TIME)
    ds_records = valid_ds_records(now, anchors) if Prefs.DS else {}
    dnskey_records = valid_dnskey_records(now, anchors) if Prefs.DNSKEY else {}

    try:
        if Prefs.JSON:
            jsonout(anchors, now, ds_records, dnskey_records)
        else:
            print_records(anchors, now, ds_records, dnskey_records)
    except dns.exception.DNSException as exc_info:
        print("ERROR:", exc_info)
        return 2

    if ds_records or dnskey_records:
        return 0
    return 1
