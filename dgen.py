'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from pullseq import over_reader, Seq
from typing import Any, Dict, Optional

# schema vocabulary:
#   "name"                                faker provider, called without arguments
#   ("pyint", {"max_value": 9})           faker provider with keyword arguments
#   {"_gen": "choice", "from": [...]}     one of the listed values
#   {"_gen": "int", "low": 0, "high": 9}  uniform integer, both bounds included
#   {"_gen": "ref", "key": "name"}        a field generated earlier in the same record
#   {"_gen": "literal", "value": x}       x as is, even when it looks like a schema
#   [item_schema, count]                  a list of count generated items
#   {field: schema, ...}                  a record, fields generated in order


class Generator:
    """turns schemas into python values, using faker for text and numpy for numbers."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _special(self, config: Dict, record: Dict) -> Any:
        kind = config["_gen"]
        if kind == "choice":
            picked = self._rng.choice(len(config["from"]))
            return config["from"][int(picked)]
        if kind == "int":
            return int(self._rng.integers(config["low"], config["high"], endpoint=True))
        if kind == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' before it was generated")
            return record[config["key"]]
        if kind == "literal":
            return config["value"]
        raise ValueError(f"unknown _gen kind: '{kind}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        record = record if record is not None else {}

        if isinstance(schema, dict):
            if "_gen" in schema:
                return self._special(schema, record)
            generated = {}
            for field, field_schema in schema.items():
                # refs see both the enclosing record and earlier fields of this one
                generated[field] = self.create(field_schema, {**record, **generated})
            return generated

        if isinstance(schema, list):
            item_schema, count = schema
            return [self.create(item_schema, record) for _ in range(count)]

        if isinstance(schema, tuple):
            return self._faker(*schema)

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def stream(self) -> Seq[Any]:
        """endless lazy sequence of generated records"""
        return over_reader(lambda: self._generator.create(self._schema))

    def take(self, count: int) -> Seq[Any]:
        return self.stream().limit(count)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
