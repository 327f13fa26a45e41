"""
File type gate for the indexer.

Only one content type is indexed (HTML). Everything else is rejected with a
message the indexer logs as a warning before moving on:
- files with an unsupported extension
- files with no extension at all (no content sniffing, no indexing of
  extensionless or nested content)
"""

from pathlib import Path
from typing import Union

from . import config


class ValidationError(Exception):
    """File cannot be indexed; the message says why"""


class FileValidator:
    """Extension whitelist check for files found during the directory walk"""

    def __init__(self, extension: str = config.SUPPORTED_EXTENSION):
        self.extension = extension

    def validate(self, path: Union[str, Path]) -> str:
        """
        Check that ``path`` has the supported extension.

        The comparison is case-sensitive: ``page.HTML`` is not indexed.

        Returns:
            The file extension (e.g. ".html")

        Raises:
            ValidationError: Missing or unsupported extension
        """
        path = Path(path)
        ext = path.suffix
        if not ext:
            raise ValidationError(
                f"File '{path}' has no extension, extensionless files are not indexed"
            )

        if ext != self.extension:
            raise ValidationError(
                f"Extension \"{ext.lstrip('.')}\" of '{path}' is not supported "
                f"(supported: {self.extension})"
            )

        return ext
