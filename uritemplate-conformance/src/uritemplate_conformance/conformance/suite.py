from __future__ import annotations

import json
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from uritemplate_conformance.conformance.outcome import ERROR, FAIL, PASS, Outcome
from uritemplate_conformance.conformance.registry import (
    DynamicTestRegistry,
    Expander,
    Extractor,
)

logger = logging.getLogger(__name__)

CHECK_EXPANSION = "expansion"
CHECK_EXTRACTION = "extraction"


@dataclass(frozen=True)
class SuiteResult:
    identity: str
    check: str
    outcome: Outcome

    def to_dict(self) -> Dict[str, Any]:
        return {"check": self.check, **self.outcome.to_dict()}


def _json_dumps_canonical(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def run_suite(
    registry: DynamicTestRegistry,
    expand: Expander,
    *,
    extract: Optional[Extractor] = None,
    max_workers: int = 1,
) -> List[SuiteResult]:
    """Run every identity in `registry` and return results in identity order.

    With `extract` set, each identity runs the extraction round trip instead
    of the plain expansion check.
    """

    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1 (got {max_workers})")

    identities = registry.list_identities()
    check = CHECK_EXPANSION if extract is None else CHECK_EXTRACTION

    def _one(identity: str) -> SuiteResult:
        if extract is None:
            outcome = registry.run(identity, expand)
        else:
            outcome = registry.run_extraction(identity, extract, expand)
        return SuiteResult(identity=identity, check=check, outcome=outcome)

    if max_workers == 1:
        results = [_one(i) for i in identities]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_one, identities))

    counts = summarize(results)
    logger.info(
        "%s suite: %d passed, %d failed, %d errored",
        check,
        counts[PASS],
        counts[FAIL],
        counts[ERROR],
    )
    return results


def summarize(results: Sequence[SuiteResult]) -> Dict[str, int]:
    counts = Counter(r.outcome.status for r in results)
    return {PASS: counts[PASS], FAIL: counts[FAIL], ERROR: counts[ERROR], "total": len(results)}


def write_suite_results(path: Path, results: Sequence[SuiteResult]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "summary": summarize(results),
        "results": [r.to_dict() for r in results],
    }
    path.write_text(_json_dumps_canonical(payload) + "\n", encoding="utf-8")
