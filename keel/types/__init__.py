from keel.types.symbol import Symbol
from keel.types.nil import Nil, NilType
from keel.types.pair import Pair, list_to_pair, pair_to_list
from keel.types.cell import Cell
from keel.types.environment import Environment
from keel.types.primitive import Primitive
from keel.types.closure import Closure

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Pair",
    "list_to_pair",
    "pair_to_list",
    "Cell",
    "Environment",
    "Primitive",
    "Closure",
]
