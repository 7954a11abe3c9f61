from .repeat import (
    PROTOCOLS,
    TrialSpec,
    AmplifiedResult,
    make_roles,
    run_trial,
    amplify,
)

__all__ = [
    "PROTOCOLS",
    "TrialSpec",
    "AmplifiedResult",
    "make_roles",
    "run_trial",
    "amplify",
]
