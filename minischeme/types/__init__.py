from minischeme.types.symbol import Symbol
from minischeme.types.procedure import Procedure
from minischeme.types.environment import Environment

__all__ = ["Symbol", "Procedure", "Environment"]
