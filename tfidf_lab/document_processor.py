"""
Document processing pipeline for the TF-IDF index

Handles:
1. Directory walk over the corpus root (depth-first, explicit stack)
2. File type gate (HTML only)
3. HTML → plain text extraction
4. Term counting and insertion into the corpus model

Failure policy:
- Unreadable file, unsupported extension, undecodable HTML: logged, skipped
- Subdirectory that cannot be listed: logged, subtree skipped
- Root directory that cannot be opened: OSError raised to the caller
"""

import logging
import os
from typing import List, Optional

from bs4 import BeautifulSoup

from .file_validator import FileValidator, ValidationError
from .tfidf import CorpusModel, index_text

logger = logging.getLogger(__name__)

# Regions whose text is never content
NON_CONTENT_TAGS = ("script", "style")


def extract_text_from_html(html_source: bytes) -> Optional[str]:
    """
    Extract the text nodes of an HTML document as a single line.

    Script and style blocks are removed, every other text node (``<title>``
    included) is kept in document order. Markup itself never reaches the
    output: no heading, list or table markers are added. Text nodes are
    joined by one space and whitespace inside them is collapsed.

    Args:
        html_source: Raw HTML bytes

    Returns:
        Flattened text, or None when the document cannot be decoded as UTF-8
    """
    try:
        html_string = html_source.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.debug(f"HTML is not valid UTF-8: {e}")
        return None

    soup = BeautifulSoup(html_string, "html.parser")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()

    return " ".join(" ".join(soup.stripped_strings).split())


class IndexingReport:
    """Outcome of one indexing pass"""

    def __init__(self):
        self.indexed = 0
        self.skipped = 0
        self.failed_dirs: List[str] = []

    def __repr__(self) -> str:
        return (
            f"IndexingReport(indexed={self.indexed}, skipped={self.skipped}, "
            f"failed_dirs={len(self.failed_dirs)})"
        )


class DocumentProcessor:
    """Walks a directory tree and feeds every HTML file into a corpus model"""

    def __init__(self, validator: Optional[FileValidator] = None):
        self.validator = validator or FileValidator()

    def index_directory(self, root: str, model: CorpusModel) -> IndexingReport:
        """
        Index every supported file below ``root`` into ``model``.

        Document identifiers are the file paths as built from ``root``
        (no canonicalization), so the same tree indexed through a different
        root spelling yields different identifiers.

        Args:
            root: Corpus root directory
            model: Corpus model to fill (owned by the caller)

        Returns:
            IndexingReport with indexed/skipped counts

        Raises:
            OSError: ``root`` cannot be opened
        """
        report = IndexingReport()

        # Opening the root is the only fatal step
        entries = self._list_dir(root)

        stack = [(root, entries)]
        visited = {os.path.realpath(root)}

        while stack:
            dir_path, entries = stack.pop()
            subdirs = []

            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError as e:
                    logger.error(f"Could not stat {entry.path}: {e}")
                    report.skipped += 1
                    continue

                if is_dir:
                    logger.debug(f"entering {entry.path}...")
                    real = os.path.realpath(entry.path)
                    if real in visited:
                        logger.warning(f"Skipping already visited directory {entry.path}")
                        continue
                    visited.add(real)
                    subdirs.append(entry.path)
                    continue

                logger.info(f"indexing {entry.path}...")
                if self.index_file(entry.path, model):
                    report.indexed += 1
                else:
                    report.skipped += 1

            # Reverse so that subdirectories pop in name order
            for sub_path in reversed(subdirs):
                try:
                    stack.append((sub_path, self._list_dir(sub_path)))
                except OSError as e:
                    logger.error(f"Could not read directory {sub_path}: {e}")
                    report.failed_dirs.append(sub_path)

        logger.info(f"Indexing finished: {report.indexed} indexed, {report.skipped} skipped, {len(report.failed_dirs)} unreadable directories")

        return report

    def index_file(self, path: str, model: CorpusModel) -> bool:
        """
        Index one file into ``model``.

        Returns:
            True if the document was added, False if it was skipped
        """
        try:
            self.validator.validate(path)
        except ValidationError as e:
            logger.warning(str(e))
            return False

        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            return False

        text = extract_text_from_html(content)
        if text is None:
            logger.error(f"Could not extract text from path: {path}")
            return False

        doc = index_text(text)
        model.add_document(path, doc)
        logger.debug(f"Added {path}: {len(doc.dtf)} unique terms, {doc.dtc} total")

        return True

    @staticmethod
    def _list_dir(dir_path: str) -> List[os.DirEntry]:
        with os.scandir(dir_path) as it:
            return sorted(it, key=lambda entry: entry.name)
