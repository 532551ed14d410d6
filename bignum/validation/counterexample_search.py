"""Counterexample search over small input domains.

Independent of the test suite: every operation in ``build_contract`` is
swept over all native input pairs of a ``Bounds`` and each finding is
recorded as a ``Counterexample``.  Three kinds of finding exist:

- the BigInteger / Rational result disagrees with the ``int`` /
  ``Fraction`` oracle, or the call raised when it should not have
- an error condition fired but nothing (or the wrong thing) was raised
- an algebraic property is false, or raised, for some input tuple

Run directly::

    python -m bignum.validation.counterexample_search
"""
from __future__ import annotations

import itertools
import logging
import sys
from dataclasses import dataclass, field
from typing import Iterator

from bignum.contract import ArithmeticContract, Bounds, build_contract
from bignum.logging_config import get_logger, setup_logging

logger = get_logger("validation")

Findings = tuple[list["Counterexample"], int]


# ---------------------------------------------------------------------------
# Report types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Counterexample:
    category: str
    operation: str
    inputs: tuple
    expected: str
    actual: str
    description: str

    def render(self, index: int) -> list[str]:
        return [
            f"  [{index}] {self.category} / {self.operation} {self.inputs}",
            f"      {self.description}",
            f"      wanted: {self.expected}",
            f"      got:    {self.actual}",
        ]


@dataclass
class SearchReport:
    counterexamples: list[Counterexample] = field(default_factory=list)
    checks_run: int = 0

    @property
    def passed(self) -> bool:
        return not self.counterexamples

    def add(self, findings: Findings) -> None:
        cxs, checks = findings
        self.counterexamples.extend(cxs)
        self.checks_run += checks

    def summary(self) -> str:
        lines = [
            f"checks: {self.checks_run}",
            f"counterexamples: {len(self.counterexamples)}",
        ]
        for i, cx in enumerate(self.counterexamples, 1):
            lines.extend(cx.render(i))
        if self.passed:
            lines.append("PASS")
        return "\n".join(lines)


def _pairs(bounds: Bounds) -> Iterator[tuple[int, int]]:
    return itertools.product(bounds.all_values(), repeat=2)


def _raised(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


# ---------------------------------------------------------------------------
# Searches
# ---------------------------------------------------------------------------

def search_postcondition_violations(contract: ArithmeticContract) -> Findings:
    """Every non-erroring input pair must satisfy every postcondition."""
    found: list[Counterexample] = []
    checks = 0
    for name, op in contract.operations.items():
        for a, b in _pairs(contract.bounds):
            checks += 1
            if op.should_raise(a, b):
                continue
            try:
                result = op.run(a, b)
            except Exception as e:
                found.append(Counterexample(
                    "unexpected_error", name, (a, b),
                    "a result", _raised(e), "call raised on valid input",
                ))
                continue
            found.extend(
                Counterexample(
                    "postcondition_violation", name, (a, b),
                    post.description, f"result={result}",
                    f"postcondition {post.name} is false",
                )
                for post in op.postconditions
                if not post.check(a, b, result)
            )
    return found, checks


def search_error_condition_violations(contract: ArithmeticContract) -> Findings:
    """Every input pair that fires an error condition must raise it."""
    found: list[Counterexample] = []
    checks = 0
    for name, op in contract.operations.items():
        for ec in op.error_conditions:
            for a, b in _pairs(contract.bounds):
                if not ec.trigger(a, b):
                    continue
                checks += 1
                wanted = ec.exception.__name__
                try:
                    result = op.run(a, b)
                except ec.exception:
                    continue
                except Exception as e:
                    found.append(Counterexample(
                        "wrong_error", name, (a, b), wanted, _raised(e),
                        f"{ec.name} raised the wrong exception",
                    ))
                    continue
                found.append(Counterexample(
                    "missing_error", name, (a, b), wanted, f"result={result}",
                    f"{ec.name} did not raise",
                ))
    return found, checks


def search_property_violations(contract: ArithmeticContract) -> Findings:
    """Check every property on the full domain, or on edge values if ternary."""
    found: list[Counterexample] = []
    checks = 0
    for name, prop in contract.all_properties:
        if prop.arity > 2:
            values = contract.bounds.edge_values()
        else:
            values = list(contract.bounds.all_values())
        for combo in itertools.product(values, repeat=prop.arity):
            checks += 1
            try:
                holds = prop.check(*combo)
            except Exception as e:
                found.append(Counterexample(
                    "property_error", name, combo, prop.description, _raised(e),
                    f"property {prop.name} raised",
                ))
                continue
            if not holds:
                found.append(Counterexample(
                    "property_violation", name, combo, prop.description, "false",
                    f"property {prop.name} does not hold",
                ))
    return found, checks


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

SEARCHES = (
    search_postcondition_violations,
    search_error_condition_violations,
    search_property_violations,
)


def run_search(bounds: Bounds) -> SearchReport:
    """Run every search against the contract for ``bounds``."""
    contract = build_contract(bounds)
    report = SearchReport()
    for search in SEARCHES:
        findings = search(contract)
        logger.debug(
            "%s on [%d, %d]: %d checks, %d counterexamples",
            search.__name__, bounds.lo, bounds.hi, findings[1], len(findings[0]),
        )
        report.add(findings)
    return report


SEARCH_CONFIGS = [
    ("small signed", Bounds(-12, 12)),
    ("non-negative", Bounds(0, 120)),
    ("negative carries", Bounds(-120, -80)),
    ("wide signed", Bounds(-150, 150)),
]


def main() -> None:
    setup_logging(logging.INFO)

    failed = []
    for name, bounds in SEARCH_CONFIGS:
        report = run_search(bounds)
        logger.info(
            "%s [%d, %d]: %d checks, %d counterexamples",
            name, bounds.lo, bounds.hi, report.checks_run, len(report.counterexamples),
        )
        print(f"# {name} [{bounds.lo}, {bounds.hi}]")
        print(report.summary())
        if not report.passed:
            failed.append(name)

    if failed:
        print(f"FAILED: {', '.join(failed)}")
        sys.exit(1)
    print("ALL DOMAINS PASSED")


if __name__ == "__main__":
    main()
