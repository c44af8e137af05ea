"""
Build wrapper provisioning.

This package handles:
1. Detecting whether the C/C++ plugin is installed on the analysis server
2. Downloading the build wrapper embedded in that plugin
3. Extracting the downloaded archive in place
4. Emitting the property that points analysis at the build wrapper output
"""

from .installer import (
    BUILD_WRAPPER_OUTPUT_PROPERTY_KEY,
    BUILD_WRAPPER_RESOURCE_NAME,
    CPP_PLUGIN_KEY,
    BuildWrapperInstaller,
)

__all__ = [
    "BuildWrapperInstaller",
    "BUILD_WRAPPER_OUTPUT_PROPERTY_KEY",
    "BUILD_WRAPPER_RESOURCE_NAME",
    "CPP_PLUGIN_KEY",
]
