"""
Build wrapper installer implementation.

Fetches the build wrapper from the analysis server when the C/C++ plugin is
installed there, and tells downstream analysis where build wrapper output
will be written.
"""

import logging
import os

from sqprovision.analysis_properties import AnalysisProperties, Property
from sqprovision.server import AnalysisServer
from sqprovision.sqprovision_config import ProvisionConfig
from sqprovision.sqprovision_exceptions import InvalidArgumentError
from sqprovision.sqprovision_logger import SqProvisionLogger
from sqprovision.sqprovision_utils import FileUtils

CPP_PLUGIN_KEY = "cpp"
BUILD_WRAPPER_RESOURCE_NAME = "build-wrapper-win-x86.zip"
BUILD_WRAPPER_OUTPUT_PROPERTY_KEY = "sonar.cfamily.build-wrapper-output"
BUILD_WRAPPER_OUTPUT_SUBDIR = "bw"


class BuildWrapperInstaller:
    """
    Installs the build wrapper shipped with the server's C/C++ plugin.

    A missing plugin or a missing embedded resource is not an error: both are
    logged and produce an empty result. A downloaded archive that cannot be
    extracted is an error and is raised to the caller.
    """

    def __init__(self, logger: SqProvisionLogger):
        """
        Initialize the build wrapper installer.

        Args:
            logger: Logger for progress and diagnostic messages
        """
        if logger is None:
            raise InvalidArgumentError("logger")
        self.logger = logger

    def install_build_wrapper(
        self,
        server: AnalysisServer,
        bin_directory: str,
        output_directory: str,
    ) -> AnalysisProperties:
        """
        Download and install the build wrapper if the server supports it.

        Args:
            server: Handle to the remote analysis server
            bin_directory: Local directory the build wrapper is installed into
            output_directory: Directory under which build wrapper output is expected

        Returns:
            AnalysisProperties holding the build wrapper output property, or
            empty if the build wrapper was not installed

        Raises:
            InvalidArgumentError: If server is None or bin_directory is blank
        """
        if server is None:
            raise InvalidArgumentError("server")
        if bin_directory is None or not bin_directory.strip():
            raise InvalidArgumentError("bin_directory")

        properties = AnalysisProperties()

        if not self.is_cpp_plugin_installed(server):
            self.logger.log(
                "The C/C++ plugin is not installed on the server. "
                "The build wrapper will not be installed.",
                logging.INFO,
            )
            return properties

        if not self.fetch_resource_from_server(server, bin_directory):
            return properties

        self.install_archive(os.path.join(bin_directory, BUILD_WRAPPER_RESOURCE_NAME))
        properties.add(self.build_output_property(output_directory))
        return properties

    def install_from_config(
        self, server: AnalysisServer, config: ProvisionConfig
    ) -> AnalysisProperties:
        """
        Install the build wrapper using the directories and log level from a config.

        Args:
            server: Handle to the remote analysis server
            config: Loaded provisioning configuration

        Returns:
            AnalysisProperties as returned by install_build_wrapper
        """
        self.logger.set_level(config.log_level)
        return self.install_build_wrapper(
            server, config.bin_directory, config.output_directory
        )

    @staticmethod
    def is_cpp_plugin_installed(server: AnalysisServer) -> bool:
        """
        Check whether the server reports the C/C++ plugin as installed.

        Args:
            server: Handle to the remote analysis server

        Returns:
            True if the plugin key is among the installed capabilities
        """
        return CPP_PLUGIN_KEY in server.get_installed_capabilities()

    def fetch_resource_from_server(self, server: AnalysisServer, target_dir: str) -> bool:
        """
        Download the build wrapper resource into target_dir.

        Args:
            server: Handle to the remote analysis server
            target_dir: Directory to download into; created if missing

        Returns:
            True if the server wrote the resource, False otherwise
        """
        self.logger.log("Downloading the build wrapper from the server...", logging.DEBUG)

        FileUtils.ensure_directory(target_dir)

        success = server.try_download_embedded_resource(
            CPP_PLUGIN_KEY, BUILD_WRAPPER_RESOURCE_NAME, target_dir
        )

        if not success:
            # An older C/C++ plugin does not embed the build wrapper
            self.logger.log(
                "The build wrapper could not be downloaded from the server. "
                "Upgrade the C/C++ plugin on the server to a version that embeds it.",
                logging.WARNING,
            )
        return success

    def install_archive(self, file_path: str) -> None:
        """
        Extract the downloaded file into its own directory if it is a zip archive.

        Non-archive resources are left as downloaded. Extraction errors propagate.

        Args:
            file_path: Full path of the downloaded resource
        """
        if not FileUtils.is_zip_file(file_path):
            return

        target_dir = os.path.dirname(file_path)
        self.logger.log(f"Extracting files to {target_dir}...", logging.DEBUG)
        FileUtils.extract_zip(self.logger, file_path, target_dir)

    @staticmethod
    def build_output_property(output_directory: str) -> Property:
        # Path composition only; the directory is created by the build wrapper itself
        return Property(
            id=BUILD_WRAPPER_OUTPUT_PROPERTY_KEY,
            value=os.path.join(output_directory, BUILD_WRAPPER_OUTPUT_SUBDIR),
        )
