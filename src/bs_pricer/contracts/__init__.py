"""
Contracts package initialization.
"""

from bs_pricer.contracts.vanilla import Contract, american_contract, european_contract

__all__ = [
    "Contract",
    "american_contract",
    "european_contract",
]
