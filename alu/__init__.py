"""
MONAD puzzle toolkit.

- `alu.core.monad` evaluates `Keep`/`Reduce` instruction programs against input digits.
- `alu.core.solver` searches for the digit sequences that return the state to 0.
- `alu.integration` loads programs from YAML/JSON and exposes the `alu-monad` CLI.
"""

__version__ = "0.1.0"
