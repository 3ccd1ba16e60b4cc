"""
Global / experimental configuration flags.
"""

from dataclasses import dataclass


@dataclass
class IonConfig:
    debug: bool = False
    warn_ignored_combinators: bool = True
    check_unique_names: bool = False


config = IonConfig()
