"""
Remote analysis server interface.

Only the narrow surface the provisioning step consumes is described here.
Transport and authentication belong to the concrete client.
"""

from .server import AnalysisServer

__all__ = ["AnalysisServer"]
