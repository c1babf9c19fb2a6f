"""Encode, decode and validate ASTM F3411 Remote ID broadcast messages.

Covers the Basic ID, Location, Authentication, Self ID and Operator ID
message types, the common header and the transport constants.
"""

__version__ = "0.1.0"