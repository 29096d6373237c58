"""
Trust anchor document: data model, parser and validity test.

The document format is the one IANA uses to publish the root zone
trust anchors (RFC 7958): a TrustAnchor element holding a Zone and
any number of KeyDigest elements, each of which may additionally
carry the PublicKey and Flags of the key it describes.
"""

import base64
import binascii
from datetime import datetime, timezone
import xml.etree.ElementTree as ET

from anchorlib.exception import AnchorError
from anchorlib.ianadata import IanaRootAnchorsXML


# DS digest type -> digest length in octets
DIGEST_LENGTH = {
    1: 20,
    2: 32,
    4: 48,
}


class KeyDigest:
    """One published trust anchor (a KeyDigest element)"""

    def __init__(self, id, valid_from, keytag, algorithm, digest_type,
                 digest, valid_until=None, public_key=None, flags=None):
        self.id = id
        self.valid_from = valid_from
        self.valid_until = valid_until
        self.keytag = keytag
        self.algorithm = algorithm
        self.digest_type = digest_type
        self.digest = digest
        self.public_key = public_key
        self.flags = flags

    def _fields(self):
        return (self.id, self.valid_from, self.valid_until, self.keytag,
                self.algorithm, self.digest_type, self.digest,
                self.public_key, self.flags)

    def __eq__(self, other):
        if not isinstance(other, KeyDigest):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __repr__(self):
        return "<KeyDigest: {} {} {} {} from={} until={}{}>".format(
            self.id, self.keytag, self.algorithm, self.digest_type,
            self.valid_from, self.valid_until,
            " (with key)" if self.public_key else "")


class TrustAnchor:
    """Trust anchor set for a zone (the TrustAnchor element)"""

    def __init__(self, zone, key_digests=(), id=None, source=None):
        self.id = id
        self.source = source
        self.zone = zone
        self.key_digests = tuple(key_digests)

    def __eq__(self, other):
        if not isinstance(other, TrustAnchor):
            return NotImplemented
        return ((self.id, self.source, self.zone, self.key_digests) ==
                (other.id, other.source, other.zone, other.key_digests))

    def __hash__(self):
        return hash((self.id, self.source, self.zone, self.key_digests))

    def __repr__(self):
        return "<TrustAnchor: zone={} id={} digests={}>".format(
            self.zone, self.id, len(self.key_digests))


def _get_int(element, tag, maximum, optional=False):
    """Return integer content of child element, range checked"""
    text = element.findtext(tag)
    if text is None and optional:
        return None
    if text is None:
        raise AnchorError("KeyDigest {}: missing {}".format(
            element.get('id'), tag))
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise AnchorError("KeyDigest {}: invalid {}: {!r}".format(
            element.get('id'), tag, text))
    value = int(text)
    if not 0 <= value <= maximum:
        raise AnchorError("KeyDigest {}: {} out of range: {}".format(
            element.get('id'), tag, value))
    return value


def _get_digest(element, digest_type):
    """Return hex digest of a KeyDigest element, length checked"""
    digest = "".join((element.findtext('Digest') or '').split())
    if not digest:
        raise AnchorError("KeyDigest {}: missing Digest".format(
            element.get('id')))
    try:
        bytes.fromhex(digest)
    except ValueError:
        raise AnchorError("KeyDigest {}: Digest is not hex: {}".format(
            element.get('id'), digest))
    length = DIGEST_LENGTH.get(digest_type)
    if length is not None and len(digest) != 2 * length:
        raise AnchorError(
            "KeyDigest {}: Digest length {} wrong for DigestType {}".format(
                element.get('id'), len(digest) // 2, digest_type))
    return digest


def _get_public_key(element):
    """Return base64 public key of a KeyDigest element, if any"""
    text = element.findtext('PublicKey')
    if text is None:
        return None
    public_key = "".join(text.split())
    if not public_key:
        return None
    try:
        base64.b64decode(public_key, validate=True)
    except binascii.Error:
        raise AnchorError("KeyDigest {}: PublicKey is not base64".format(
            element.get('id')))
    return public_key


def parse_key_digest(element):
    """Build a KeyDigest object from a KeyDigest element"""

    valid_from = element.get('validFrom')
    if not valid_from:
        raise AnchorError("KeyDigest {}: missing validFrom".format(
            element.get('id')))

    public_key = _get_public_key(element)
    flags = _get_int(element, 'Flags', 0xffff, optional=True)
    if public_key is not None and flags is None:
        raise AnchorError("KeyDigest {}: PublicKey without Flags".format(
            element.get('id')))

    digest_type = _get_int(element, 'DigestType', 0xff)

    return KeyDigest(id=element.get('id'),
                     valid_from=valid_from,
                     valid_until=element.get('validUntil') or None,
                     keytag=_get_int(element, 'KeyTag', 0xffff),
                     algorithm=_get_int(element, 'Algorithm', 0xff),
                     digest_type=digest_type,
                     digest=_get_digest(element, digest_type),
                     public_key=public_key,
                     flags=flags)


def parse_document(text=IanaRootAnchorsXML):
    """
    Parse trust anchor XML text into a TrustAnchor object. Raises
    AnchorError if the document is malformed. Timestamps are not
    checked here; a record with a bad timestamp is simply never valid.
    """

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise AnchorError("malformed trust anchor document: {}".format(e))

    if root.tag != 'TrustAnchor':
        raise AnchorError("unexpected root element: {}".format(root.tag))

    zone = (root.findtext('Zone') or '').strip()
    if not zone:
        raise AnchorError("trust anchor document has no Zone")

    key_digests = [parse_key_digest(e) for e in root.findall('KeyDigest')]
    return TrustAnchor(zone, key_digests,
                       id=root.get('id'), source=root.get('source'))


def load_file(path):
    """Read and parse a trust anchor document from a file"""
    try:
        with open(path, 'rb') as f:
            text = f.read()
    except OSError as e:
        raise AnchorError("can't read {}: {}".format(path, e))
    return parse_document(text)


def get_raw_anchors():
    """Return the built-in IANA root trust anchors, parsed"""
    return parse_document()


def parse_timestamp(text):
    """
    Parse an RFC 3339 timestamp with explicit UTC offset. Returns an
    offset aware datetime, or None if the text can't be parsed.
    """
    if not text:
        return None
    text = text.strip()
    if text[-1:] in ('Z', 'z'):
        text = text[:-1] + '+00:00'
    try:
        timestamp = datetime.fromisoformat(text)
    except ValueError:
        return None
    if timestamp.tzinfo is None:
        return None
    return timestamp


def utc_now(now=None):
    """Return given time as an aware datetime; naive means UTC"""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def is_valid(record, now=None):
    """
    Is the key digest valid at the given time? That is, strictly after
    validFrom and, if validUntil is present, strictly before it. A
    record whose timestamps can't be parsed is never valid.
    """

    now = utc_now(now)

    valid_from = parse_timestamp(record.valid_from)
    if valid_from is None:
        return False
    if record.valid_until is None:
        return now > valid_from

    valid_until = parse_timestamp(record.valid_until)
    if valid_until is None:
        return False
    return valid_from < now < valid_until


# Built-in root anchors, parsed once at import
root_anchors = parse_document()
