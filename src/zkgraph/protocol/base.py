from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Tuple, Type, TypeVar

from .messages import Message


class ProtocolViolationError(RuntimeError):
    """A role received a message it cannot handle in its current round."""


M = TypeVar("M", bound=Message)


def expect(msg: Message, kind: Type[M], role: str) -> M:
    """Return *msg* if it is a *kind*, else raise ProtocolViolationError."""
    if not isinstance(msg, kind):
        raise ProtocolViolationError(
            f"{role} expected {kind.__name__}, received {type(msg).__name__}: {msg}"
        )
    return msg


def draw_bit(rng: random.Random | None = None, p: float = 0.5) -> bool:
    """Bit that is True with probability p."""
    return (rng or random).random() < p


def check_bias(p: float) -> float:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Bias p must lie in [0, 1], got {p}.")
    return p


class Prover(ABC):
    """
    Prover side of an interactive proof.

    handle() takes the latest verifier message and returns
    (reply, done). When done is True the interaction ends and the reply
    is not delivered.
    """

    def init(self) -> None:
        """Called once before the verifier's first message."""

    @abstractmethod
    def handle(self, msg: Message) -> Tuple[Message, bool]:
        ...


class Verifier(ABC):
    """
    Verifier side of an interactive proof.

    The verifier always speaks first, if need be with an Empty placeholder.
    handle() returns (reply, accept); the engine keeps the most recent
    accept flag as the verdict.
    """

    @abstractmethod
    def init(self) -> Message:
        ...

    @abstractmethod
    def handle(self, msg: Message) -> Tuple[Message, bool]:
        ...
