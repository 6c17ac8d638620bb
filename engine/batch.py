import logging
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from parsemath.errors import ParseError
from parsemath.eval import evaluate

logger = logging.getLogger(__name__)

COLUMNS = ["expression", "value", "error"]


def evaluate_batch(expressions: Iterable[str], max_depth: Optional[int] = None) -> pd.DataFrame:
    """
    Evaluate each expression independently, one row per input (order kept).
    A failed row has value NaN and the error message; other rows are unaffected.
    """
    rows = []
    for expr in expressions:
        try:
            rows.append((expr, evaluate(expr, max_depth=max_depth), None))
        except ParseError as e:
            logger.info("batch: %r failed: %s", expr, e)
            rows.append((expr, np.nan, str(e)))
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["value"] = df["value"].astype(float)
    return df
