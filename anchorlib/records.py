"""
DS and DNSKEY record projections of trust anchors.
"""

import base64
import struct
import dns.name
import dns.rdata
import dns.rdataclass
import dns.rdatatype
import dns.rrset
import dns.dnssec
from Crypto.Hash import SHA1, SHA256, SHA384

from anchorlib.exception import AnchorError


# DNSKEY protocol field; always 3 (RFC 4034, Section 2.1.2)
DNSKEY_PROTOCOL = 3

# TTL of the root DNSKEY RRset
ANCHOR_TTL = 172800

# DS (Delegation Signer) Digest Algorithms
DS_ALG = {
    1: SHA1,
    2: SHA256,
    4: SHA384,
}

# DNSSEC algorithm number -> name
ALG = {
    5: "RSASHA1",
    7: "NSEC3-RSASHA1",
    8: "RSASHA256",
    10: "RSASHA512",
    13: "ECDSA-P256",
    14: "ECDSA-P384",
    15: "ED25519",
    16: "ED448",
}


class DSRecord:
    """Trust anchor in DS record form"""

    def __init__(self, zone, keytag, algorithm, digest_type, digest):
        self.zone = dns.name.from_text(zone)
        self.rdclass = dns.rdataclass.IN
        self.rdtype = dns.rdatatype.DS
        self.keytag = keytag
        self.algorithm = algorithm
        self.digest_type = digest_type
        self.digest = digest

    @classmethod
    def from_key_digest(cls, zone, kd):
        """Make DSRecord from a KeyDigest"""
        return cls(zone, kd.keytag, kd.algorithm, kd.digest_type, kd.digest)

    def to_text(self):
        """Presentation format of the DS rdata"""
        return "{} {} {} {}".format(self.keytag, self.algorithm,
                                    self.digest_type, self.digest)

    def to_rdata(self):
        """Return dnspython DS rdata"""
        return dns.rdata.from_text(self.rdclass, self.rdtype, self.to_text())

    def to_rrset(self, ttl=ANCHOR_TTL):
        """Return dnspython RRset holding just this DS"""
        return dns.rrset.from_rdata(self.zone, ttl, self.to_rdata())

    def __repr__(self):
        return "DS: {} {} {} ({}) {}".format(
            self.zone, self.keytag,
            ALG.get(self.algorithm, "Unknown"), self.algorithm,
            self.digest_type)


class DNSKEYRecord:
    """Trust anchor in DNSKEY record form"""

    def __init__(self, zone, flags, algorithm, public_key):
        if flags is None:
            raise AnchorError("DNSKEY for {} has no flags".format(zone))
        self.zone = dns.name.from_text(zone)
        self.rdclass = dns.rdataclass.IN
        self.rdtype = dns.rdatatype.DNSKEY
        self.flags = flags
        self.protocol = DNSKEY_PROTOCOL
        self.algorithm = algorithm
        self.public_key = public_key
        self.sep_flag = (self.flags & 0x01) == 0x01
        self.revoke_flag = (self.flags >> 7 & 0x01) == 0x01

    @classmethod
    def from_key_digest(cls, zone, kd):
        """Make DNSKEYRecord from a KeyDigest carrying a public key"""
        return cls(zone, kd.flags, kd.algorithm, kd.public_key)

    @property
    def rawkey(self):
        """Public key as bytes"""
        return base64.b64decode(self.public_key)

    def keytag(self):
        """Key tag computed from the key itself"""
        return dns.dnssec.key_id(self.to_rdata())

    def to_text(self):
        """Presentation format of the DNSKEY rdata"""
        return "{} {} {} {}".format(self.flags, self.protocol,
                                    self.algorithm, self.public_key)

    def to_rdata(self):
        """Return dnspython DNSKEY rdata"""
        return dns.rdata.from_text(self.rdclass, self.rdtype, self.to_text())

    def to_rrset(self, ttl=ANCHOR_TTL):
        """Return dnspython RRset holding just this DNSKEY"""
        return dns.rrset.from_rdata(self.zone, ttl, self.to_rdata())

    def __repr__(self):
        flags_text = ''
        if self.sep_flag:
            flags_text += " SEP"
        if self.revoke_flag:
            flags_text += " REV"
        return "DNSKEY: {} {} {} {} ({}){}".format(
            self.zone, self.flags, self.keytag(),
            ALG.get(self.algorithm, "Unknown"), self.algorithm, flags_text)


def dnskey_matches_ds(dnskey, ds):
    """
    Does the DS record's digest correspond to the DNSKEY?
    ds digest = digest_algorithm( DNSKEY owner name | DNSKEY RDATA);
    DNSKEY RDATA = Flags | Protocol | Algorithm | Public Key.
    """

    if ds.keytag != dnskey.keytag():
        return False
    if ds.algorithm != dnskey.algorithm:
        return False
    if ds.digest_type not in DS_ALG:
        return False
    preimage = (dnskey.zone.to_digestable() +
                struct.pack('!H', dnskey.flags) +
                struct.pack('B', dnskey.protocol) +
                struct.pack('B', dnskey.algorithm) +
                dnskey.rawkey)
    hashout = DS_ALG[ds.digest_type].new(data=preimage)
    return hashout.digest() == bytes.fromhex(ds.digest)


def ds_rrset_matches_dnskey(ds_list, dnskey):
    """
    Check that the DS list includes at least one DS record whose
    digest field corresponds to the DNSKEY.
    """
    for ds in ds_list:
        if dnskey_matches_ds(dnskey, ds):
            return True
    return False
