"""
Currently valid trust anchors, as DS and DNSKEY records.

Every function here takes an optional reference time (default: now)
and an optional TrustAnchor (default: the built-in IANA root anchors)
and returns freshly built results.
"""

from anchorlib.prefs import Prefs
from anchorlib.anchor import root_anchors, is_valid, utc_now
from anchorlib.records import DSRecord, DNSKEYRecord


def valid_key_digests(now=None, anchors=None):
    """Return list of KeyDigests valid at given time, in document order"""

    if anchors is None:
        anchors = root_anchors
    now = utc_now(now)

    result = []
    for kd in anchors.key_digests:
        if is_valid(kd, now):
            result.append(kd)
        elif Prefs.VERBOSE and not Prefs.JSON:
            print("# INFO: anchor {} keytag {} not valid at {} "
                  "(from={} until={})".format(
                      kd.id, kd.keytag, now.isoformat(),
                      kd.valid_from, kd.valid_until))
    return result


def valid_ds_records(now=None, anchors=None):
    """
    Return dict of keytag -> DSRecord for anchors valid at given time.
    Should two valid anchors share a key tag, the later one wins.
    """

    if anchors is None:
        anchors = root_anchors

    ds_records = {}
    for kd in valid_key_digests(now, anchors):
        ds_records[kd.keytag] = DSRecord.from_key_digest(anchors.zone, kd)
    return ds_records


def valid_dnskey_records(now=None, anchors=None):
    """
    Return dict of keytag -> DNSKEYRecord for anchors valid at given
    time. Anchors without public key material are DS only and skipped.
    """

    if anchors is None:
        anchors = root_anchors

    dnskey_records = {}
    for kd in valid_key_digests(now, anchors):
        if not kd.public_key:
            if Prefs.VERBOSE and not Prefs.JSON:
                print("# INFO: anchor {} keytag {} has no public key".format(
                    kd.id, kd.keytag))
            continue
        dnskey_records[kd.keytag] = DNSKEYRecord.from_key_digest(
            anchors.zone, kd)
    return dnskey_records
