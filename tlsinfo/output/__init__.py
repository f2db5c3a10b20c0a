"""
tlsinfo Output
===============

Console and JSON report renderers.
"""

from tlsinfo.output.console import TLSConsoleOutput
from tlsinfo.output.report import TLSReportGenerator, registry_records

__all__ = ["TLSConsoleOutput", "TLSReportGenerator", "registry_records"]
