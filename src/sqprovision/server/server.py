"""
Protocol for the remote analysis server handle.
"""

from typing import Protocol, Set, runtime_checkable


@runtime_checkable
class AnalysisServer(Protocol):
    """
    The subset of the remote analysis server used during provisioning.

    Implementations may raise from either method on transport failure; such
    errors are not handled by the provisioning step.
    """

    def get_installed_capabilities(self) -> Set[str]:
        """
        Returns the identifiers of the optional capabilities (plugins)
        installed on the server.
        """
        ...

    def try_download_embedded_resource(
        self, capability_id: str, resource_name: str, target_dir: str
    ) -> bool:
        """
        Asks the server to write the embedded resource `resource_name` of
        capability `capability_id` into `target_dir`.

        Returns:
            True if the file was written, False if the server does not have it
        """
        ...
