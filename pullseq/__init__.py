r"""
'                 _ _
'     _ __  _   _| | |___  ___  __ _
'    | '_ \| | | | | / __|/ _ \/ _` |
'    | |_) | |_| | | \__ \  __/ (_| |
'    | .__/ \__,_|_|_|___/\___|\__, |
'    |_|                          |_|
"""

import logging

# expose the protocol and the base class
from .sequence import ISeq, Seq, SupportsCurrentCopy, non_volatile

# expose the factory functions
from .factories import (
    over,
    over_list,
    over_map,
    over_map_keys,
    over_map_values,
    over_string,
    over_channel,
    over_reader,
    from_iterable,
    empty,
    error,
    from_range,
    infinite_range,
    cycle,
    cycle_seq,
    repeat,
    repeat_seq,
    repeatedly_apply,
    chain,
    chain_from_iterator,
    zip_all,
    zip_longest,
    pairwise,
    pairwise_longest,
    cartesian_product,
    cartesian_product_seq,
    combinations,
    combinations_with_replacement,
    permutations,
    power_set,
    S
)

# expose supporting types
from .types import Pair, CLOSED
from .extensions.combinatorics import MAX_POWER_SET_ITEMS

# the host application decides where records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "ISeq",
    "Seq",
    "SupportsCurrentCopy",
    "non_volatile",
    "over",
    "over_list",
    "over_map",
    "over_map_keys",
    "over_map_values",
    "over_string",
    "over_channel",
    "over_reader",
    "from_iterable",
    "empty",
    "error",
    "from_range",
    "infinite_range",
    "cycle",
    "cycle_seq",
    "repeat",
    "repeat_seq",
    "repeatedly_apply",
    "chain",
    "chain_from_iterator",
    "zip_all",
    "zip_longest",
    "pairwise",
    "pairwise_longest",
    "cartesian_product",
    "cartesian_product_seq",
    "combinations",
    "combinations_with_replacement",
    "permutations",
    "power_set",
    "S",
    "Pair",
    "CLOSED",
    "MAX_POWER_SET_ITEMS"
]
