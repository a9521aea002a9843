from .relay import RelayRouter
from .queue import MatchmakingQueue
from .pairing import pair_waiting
from .partners import PartnerDirectory
from .registry import ConnectionRegistry
from .controller import SessionController

__all__ = [
    "ConnectionRegistry",
    "MatchmakingQueue",
    "PartnerDirectory",
    "RelayRouter",
    "SessionController",
    "pair_waiting",
]
