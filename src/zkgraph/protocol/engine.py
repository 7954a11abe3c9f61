from __future__ import annotations

import sys

from .base import Prover, Verifier


def run_interactive_proof(prover: Prover, verifier: Verifier, *, verbose: bool = False) -> bool:
    """
    Drive one prover/verifier exchange to completion and return the verdict.

    The verifier speaks first. The prover's reply is forwarded to the
    verifier until the prover raises its done flag; that final reply is
    dropped and the verifier's last accept flag is returned (False if the
    verifier never answered).
    """
    prover.init()
    verifier_msg = verifier.init()
    accept = False
    r = 0

    while True:
        if verbose:
            print(f"[round {r}] verifier -> prover: {verifier_msg}", file=sys.stderr)
        prover_msg, done = prover.handle(verifier_msg)
        if done:
            break
        if verbose:
            print(f"[round {r}] prover -> verifier: {prover_msg}", file=sys.stderr)
        verifier_msg, accept = verifier.handle(prover_msg)
        r += 1

    if verbose:
        verdict = "accepts" if accept else "rejects"
        print(f"[round {r}] prover done; verifier {verdict}", file=sys.stderr)
    return accept
