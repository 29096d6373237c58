#!/usr/bin/env python3

"""
rootanchors.py
Print the currently valid DNSSEC root zone trust anchors.
"""


import sys
from anchorlib.main import main


if __name__ == '__main__':

    sys.exit(main())
