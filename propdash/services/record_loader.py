"""
Record loading for the list views.

Record sets arrive from exported CSV/JSON files or from DataFrames; this
module materializes them as validated record models. Rows that fail
validation are logged and left out so one bad row cannot empty a view.
"""

import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import pandas as pd
from pydantic import ValidationError

from ..models.base import RecordModel
from .error_handler import ErrorHandler

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)


def _clean_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Drop NaN cells pandas produces for empty optional columns."""
    cleaned = {}
    for key, value in row.items():
        if isinstance(value, float) and math.isnan(value):
            continue
        cleaned[str(key)] = value
    return cleaned


def records_from_dataframe(
    df: pd.DataFrame,
    model: Type[RecordT],
    error_handler: Optional[ErrorHandler] = None,
) -> List[RecordT]:
    """Validate every DataFrame row as ``model``.

    Invalid rows are skipped and reported to ``error_handler``.
    """
    if df is None or df.empty:
        return []

    handler = error_handler or ErrorHandler()
    records: List[RecordT] = []
    for position, row in enumerate(df.to_dict(orient="records")):
        try:
            records.append(model.model_validate(_clean_row(row)))
        except ValidationError as e:
            handler.handle_exception(
                e,
                context=f"load {model.__name__} records",
                additional_data={"row": position, "error_count": e.error_count()},
            )
    return records


def load_records(
    path: Union[str, Path],
    model: Type[RecordT],
    error_handler: Optional[ErrorHandler] = None,
) -> List[RecordT]:
    """
    Load a record set from a CSV or JSON file

    Args:
        path: ``.csv`` or ``.json`` file (JSON as an array of objects)
        model: Record model to validate rows against
        error_handler: Receives every skipped row

    Returns:
        The valid records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is not supported
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False, keep_default_dates=False)
    else:
        raise ValueError(f"Unsupported record file type: {suffix}")

    records = records_from_dataframe(df, model, error_handler)
    logger.info(f"Loaded {len(records)} {model.__name__} records from {path}")
    return records
