import logging
import math
from contextlib import asynccontextmanager, contextmanager
from functools import lru_cache
from typing import List, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from engine.batch import evaluate_batch
from parsemath.analyzer import analyze
from parsemath.ast_utils import ast_to_dict, ast_to_infix, ast_to_pretty
from parsemath.config import Settings
from parsemath.errors import ParseError
from parsemath.eval import eval_node
from parsemath.parser import parse_expression

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=get_settings().log_level)
    yield


app = FastAPI(title="parsemath", lifespan=lifespan)


class ExpressionBody(BaseModel):
    expression: str

class BatchBody(BaseModel):
    expressions: List[str] = []


def _finite_or_none(x: float) -> Optional[float]:
    # JSON has no inf / nan
    return x if math.isfinite(x) else None


@contextmanager
def _bad_request(expression: str):
    try:
        yield
    except RecursionError as e:
        err = ParseError.wrap(e)
        logger.warning("rejected %r: %s", expression, err)
        raise HTTPException(status_code=400, detail=str(err)) from e
    except ParseError as e:
        logger.info("rejected %r: %s", expression, e)
        raise HTTPException(status_code=400, detail=str(e)) from e


def _parse(expression: str):
    return parse_expression(expression, max_depth=get_settings().max_depth)


@app.post("/parse")
def parse(body: ExpressionBody):
    with _bad_request(body.expression):
        ast = _parse(body.expression)
        meta = analyze(ast)
    return {
        "ok": True,
        "operators": dict(meta.operators),
        "numbers": meta.numbers,
        "depth": meta.depth,
    }


@app.post("/ast")
def ast_view(body: ExpressionBody):
    with _bad_request(body.expression):
        ast = _parse(body.expression)
        return {
            "ok": True,
            "pretty": ast_to_pretty(ast),
            "tree": ast_to_dict(ast),
            "infix": ast_to_infix(ast),
        }


@app.post("/evaluate")
def evaluate(body: ExpressionBody):
    with _bad_request(body.expression):
        result = eval_node(_parse(body.expression))
    return {"expression": body.expression, "result": _finite_or_none(result)}


@app.post("/evaluate_batch")
def evaluate_batch_api(body: BatchBody):
    df = evaluate_batch(body.expressions, max_depth=get_settings().max_depth)
    results = [
        {
            "expression": r.expression,
            "value": _finite_or_none(r.value),
            "error": None if pd.isna(r.error) else r.error,
        }
        for r in df.itertuples(index=False)
    ]
    return {"results": results}
