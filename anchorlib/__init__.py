"""
DNSSEC root zone trust anchors, as published by IANA.
"""
