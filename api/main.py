import logging
from contextlib import asynccontextmanager
from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from algorithms.brute_force import brute_force_find_all
from algorithms.errors import AlignmentTooLargeError, UndefinedDistanceError
from algorithms.lcs import distance_from_length, lcs_length
from algorithms.rabin_karp import rabin_karp_find_all
from utils import config
from utils.text_io import SequenceInputError, parse_sequence

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config.configure_logging()
    yield


app = FastAPI(title="DNA Pattern Matching API", version="1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ALGORITHMS = {
    "bf": "brute-force", "bruteforce": "brute-force", "brute-force": "brute-force",
    "kr": "rabin-karp", "rk": "rabin-karp", "rabinkarp": "rabin-karp", "rabin-karp": "rabin-karp",
    "lcs": "lcs", "lcss": "lcs",
}
FINDERS = {"brute-force": brute_force_find_all, "rabin-karp": rabin_karp_find_all}


class AnalyzeRequest(BaseModel):
    algorithm: str = Field(pattern=r"^(?i:bf|brute-?force|kr|rk|rabin-?karp|lcs|lcss)$")
    sequence: str
    pattern: str  # second sequence for lcs

    @field_validator("sequence", "pattern")
    @classmethod
    def _dna_only(cls, v: str, info) -> str:
        try:
            return parse_sequence(v, info.field_name)
        except SequenceInputError as e:
            raise ValueError(str(e)) from e


class AnalyzeResponse(BaseModel):
    algorithm: str
    occurrences: Optional[int] = None
    matches: Optional[List[Tuple[int, int]]] = None  # (start, len)
    lcs_length: Optional[int] = None
    distance: Optional[float] = None  # null when a sequence is empty


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    limit = config.max_sequence_length()
    for label, seq in (("sequence", req.sequence), ("pattern", req.pattern)):
        if len(seq) > limit:
            raise HTTPException(status_code=413, detail=f"{label} longer than {limit} symbols")

    algo = ALGORITHMS[req.algorithm.lower()]
    logger.info("analyze algorithm=%s sequence=%d pattern=%d", algo, len(req.sequence), len(req.pattern))

    if algo == "lcs":
        try:
            length = lcs_length(req.sequence, req.pattern, config.max_lcs_cells())
        except AlignmentTooLargeError as e:
            raise HTTPException(status_code=413, detail=str(e)) from e
        try:
            distance = round(distance_from_length(length, len(req.sequence), len(req.pattern)), 6)
        except UndefinedDistanceError as e:
            logger.info("%s", e)
            distance = None
        return AnalyzeResponse(algorithm=algo, lcs_length=length, distance=distance)

    offsets = FINDERS[algo](req.sequence, req.pattern)
    return AnalyzeResponse(
        algorithm=algo,
        occurrences=len(offsets),
        matches=[(i, len(req.pattern)) for i in offsets],
    )

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
