"""
This module exports the build wrapper provisioning step and its collaborators.
"""

from .analysis_properties import AnalysisProperties, Property
from .build_wrapper import BuildWrapperInstaller
from .server import AnalysisServer
from .sqprovision_config import ProvisionConfig
from .sqprovision_exceptions import InvalidArgumentError, SqProvisionException
from .sqprovision_logger import SqProvisionLogger

__all__ = [
    "AnalysisProperties",
    "AnalysisServer",
    "BuildWrapperInstaller",
    "InvalidArgumentError",
    "Property",
    "ProvisionConfig",
    "SqProvisionException",
    "SqProvisionLogger",
]
