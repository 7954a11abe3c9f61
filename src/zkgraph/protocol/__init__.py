from .messages import (
    Message,
    Empty,
    GraphMessage,
    BijectionMessage,
    BitMessage,
    Done,
)
from .base import (
    Prover,
    Verifier,
    ProtocolViolationError,
    expect,
    draw_bit,
    check_bias,
)
from .engine import run_interactive_proof
from .gi import GIProver, GIMaliciousProver, GIVerifier
from .gni import GNIProver, GNIMaliciousProver, GNIVerifier

__all__ = [
    "Message",
    "Empty",
    "GraphMessage",
    "BijectionMessage",
    "BitMessage",
    "Done",
    "Prover",
    "Verifier",
    "ProtocolViolationError",
    "expect",
    "draw_bit",
    "check_bias",
    "run_interactive_proof",
    "GIProver",
    "GIMaliciousProver",
    "GIVerifier",
    "GNIProver",
    "GNIMaliciousProver",
    "GNIVerifier",
]
