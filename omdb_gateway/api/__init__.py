"""
HTTP API for the OMDb gateway.
"""
