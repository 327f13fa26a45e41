"""
Model persistence on the local filesystem

Format (JSON, field names fixed for compatibility with existing model files):
{
    "doc_index": {"<path>": {"dtf": {"<term>": <count>}, "dtc": <count>}},
    "tcf_table": {"<term>": <document count>}
}

Loading goes through the pydantic schema in ``tfidf.model``, so a file with
the wrong shape is rejected instead of producing wrong scores later.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .tfidf import CorpusModel

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Model file could not be written, read or validated"""


def save_model(model: CorpusModel, output_path: Union[str, Path]) -> None:
    """
    Write ``model`` as JSON to ``output_path`` (overwritten if present).

    Raises:
        StorageError: File cannot be written
    """
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(model.model_dump_json())
    except OSError as e:
        raise StorageError(f"could not save model to path {output_path}: {e}") from e

    logger.info(f"Saved model with {model.document_count} documents and {len(model.tcf_table)} terms to {output_path}")


def load_model(model_path: Union[str, Path]) -> CorpusModel:
    """
    Read a model previously written by ``save_model``.

    Raises:
        StorageError: File missing/unreadable or not a valid model
    """
    try:
        with open(model_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise StorageError(f"could not read model file {model_path}: {e}") from e

    try:
        model = CorpusModel.model_validate_json(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValidationError) as e:
        raise StorageError(f"invalid model file {model_path}: {e}") from e

    logger.info(f"Loaded model with {model.document_count} documents from {model_path}")

    return model
