"""Built-in grammars for Tinta.

Each module defines one Grammar: an ordered rule table plus the names that
select it. Grammars are immutable module-level constants.
"""

from tinta.grammars.fallback import FALLBACK
from tinta.grammars.json import JSON
from tinta.grammars.rust import RUST
from tinta.grammars.shell import SHELL
from tinta.grammars.solidity import SOLIDITY
from tinta.grammars.toml import TOML
from tinta.grammars.yaml import YAML

# Registration order of the default registry
BUILTIN_GRAMMARS = (YAML, SHELL, JSON, RUST, SOLIDITY, TOML)

__all__ = [
    "BUILTIN_GRAMMARS",
    "FALLBACK",
    "JSON",
    "RUST",
    "SHELL",
    "SOLIDITY",
    "TOML",
    "YAML",
]
