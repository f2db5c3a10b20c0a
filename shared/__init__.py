"""
tlsinfo Shared Module
=====================

Configuration, logging, and console utilities shared by the tlsinfo
command-line front end.
"""

from shared.config import TLSInfoConfig

__all__ = ["TLSInfoConfig"]
