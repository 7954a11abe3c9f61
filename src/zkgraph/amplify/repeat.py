from __future__ import annotations

import sys
from dataclasses import dataclass
from multiprocessing import Pool
from typing import Iterable, Optional, Tuple

from zkgraph.graph.digraph import GraphPair
from zkgraph.protocol.base import Prover, Verifier
from zkgraph.protocol.engine import run_interactive_proof
from zkgraph.protocol.gi import GIMaliciousProver, GIProver, GIVerifier
from zkgraph.protocol.gni import GNIMaliciousProver, GNIProver, GNIVerifier


PROTOCOLS = ("gi", "gni")


@dataclass(frozen=True)
class TrialSpec:
    """
    Picklable description of one proof run.

    protocol: "gi" | "gni"
    honest:   honest prover if True, else the malicious variant with bias p
    witness:  optional g0 -> g1 isomorphism for the honest GI prover
    """

    protocol: str
    instance: GraphPair
    honest: bool = True
    p: float = 0.5
    witness: Optional[Tuple[int, ...]] = None

    def __post_init__(self) -> None:
        if self.protocol not in PROTOCOLS:
            raise ValueError(f"Unknown protocol {self.protocol!r}; expected one of {PROTOCOLS}.")


@dataclass(frozen=True)
class AmplifiedResult:
    rounds: int
    accepted: int

    @property
    def verdict(self) -> bool:
        """Accept only if every independent round accepted."""
        return self.accepted == self.rounds

    @property
    def acceptance_rate(self) -> float:
        return self.accepted / self.rounds


def make_roles(spec: TrialSpec) -> Tuple[Prover, Verifier]:
    """Fresh prover and verifier for a single run of *spec*."""
    inst = spec.instance
    if spec.protocol == "gi":
        if spec.honest:
            prover: Prover = GIProver(inst, witness=spec.witness)
        else:
            prover = GIMaliciousProver(inst, p=spec.p)
        return prover, GIVerifier(inst)
    if spec.honest:
        prover = GNIProver(inst)
    else:
        prover = GNIMaliciousProver(p=spec.p)
    return prover, GNIVerifier(inst)


def run_trial(spec: TrialSpec) -> bool:
    prover, verifier = make_roles(spec)
    return run_interactive_proof(prover, verifier)


def _repeat(spec: TrialSpec, rounds: int) -> Iterable[TrialSpec]:
    for _ in range(rounds):
        yield spec


def amplify(
    spec: TrialSpec,
    rounds: int,
    *,
    processes: int = 1,
    chunksize: int = 50,
    verbose: bool = False,
) -> AmplifiedResult:
    """
    Run *spec* `rounds` times independently and count the accepting runs.

    With processes > 1 the runs are spread over a multiprocessing Pool;
    workers share nothing but the frozen spec.
    """
    if rounds < 1:
        raise ValueError(f"rounds must be positive, got {rounds}.")
    if verbose:
        kind = "honest" if spec.honest else f"malicious(p={spec.p})"
        print(f"[{spec.protocol}] {rounds} rounds, {kind} prover, processes={processes}...", file=sys.stderr)

    if processes <= 1:
        accepted = sum(1 for _ in range(rounds) if run_trial(spec))
    else:
        with Pool(processes=processes) as pool:
            accepted = sum(pool.imap_unordered(run_trial, _repeat(spec, rounds), chunksize=chunksize))

    result = AmplifiedResult(rounds=rounds, accepted=accepted)
    if verbose:
        print(
            f"[{spec.protocol}] accepted {accepted}/{rounds} "
            f"(rate {result.acceptance_rate:.3f}, verdict {'accept' if result.verdict else 'reject'})",
            file=sys.stderr,
        )
    return result
