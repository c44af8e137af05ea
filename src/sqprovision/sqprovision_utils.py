"""
This file contains various utility functions like I/O operations, handling archives, etc.
"""

import logging
import os
import zipfile

from sqprovision.sqprovision_logger import SqProvisionLogger


class FileUtils:
    """
    Utility functions for file operations.
    """

    @staticmethod
    def ensure_directory(path: str) -> None:
        """
        Creates the directory and any missing parents. Does nothing if it already exists.
        """
        os.makedirs(path, exist_ok=True)

    @staticmethod
    def is_zip_file(file_name: str) -> bool:
        """
        Checks whether the file name carries a .zip extension, ignoring case.
        """
        return os.path.splitext(file_name)[1].lower() == ".zip"

    @staticmethod
    def extract_zip(logger: SqProvisionLogger, archive_path: str, target_path: str) -> None:
        """
        Extracts the zip archive at archive_path into target_path, overwriting existing files.

        Errors from a corrupt archive or the filesystem are not caught here.
        """
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            entries = zip_ref.infolist()
            zip_ref.extractall(target_path)

        logger.log(
            f"Extracted {len(entries)} entries from {archive_path} to {target_path}",
            logging.DEBUG,
        )
