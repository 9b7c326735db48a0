"""Learning management API package.

Only the presence of this file matters: it makes ``lms`` a regular package so
the layered subpackages resolve from this source tree.
"""
