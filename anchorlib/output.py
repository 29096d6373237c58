"""
Output of trust anchor records, in zone file or JSON form.
"""

import json

from anchorlib.prefs import Prefs


def print_records(anchors, now, ds_records, dnskey_records):
    """Print records in zone file presentation format"""
    print("; Trust anchors for zone {} valid at {}".format(
        anchors.zone, now.isoformat()))
    if anchors.source:
        print("; Source: {}".format(anchors.source))
    for keytag in sorted(ds_records):
        print(ds_records[keytag].to_rrset(Prefs.TTL).to_text())
    for keytag in sorted(dnskey_records):
        dnskey = dnskey_records[keytag]
        if Prefs.VERBOSE:
            print("; {}".format(dnskey))
        print(dnskey.to_rrset(Prefs.TTL).to_text())


def jsonout(anchors, now, ds_records, dnskey_records):
    """
    Print JSON encoded trust anchors
    """
    result = {}
    result['zone'] = anchors.zone
    result['id'] = anchors.id
    result['source'] = anchors.source
    result['time'] = now.isoformat()
    if Prefs.DS:
        result['ds'] = []
        for keytag in sorted(ds_records):
            ds = ds_records[keytag]
            result['ds'].append({
                "keytag": ds.keytag,
                "algorithm": ds.algorithm,
                "digest_type": ds.digest_type,
                "digest": ds.digest,
            })
    if Prefs.DNSKEY:
        result['dnskey'] = []
        for keytag in sorted(dnskey_records):
            dnskey = dnskey_records[keytag]
            result['dnskey'].append({
                "keytag": keytag,
                "flags": dnskey.flags,
                "protocol": dnskey.protocol,
                "algorithm": dnskey.algorithm,
                "public_key": dnskey.public_key,
            })
    print(json.dumps(result))
