"""ACME DNS-01 challenge solver backed by the Cloudflare API."""

from cf_dns01.config import SolverConfig, load_config
from cf_dns01.exceptions import Dns01Error, PropagationTimeoutError, RemoteApiError, ZoneNotFoundError
from cf_dns01.models import ChallengePreparation
from cf_dns01.solver import CloudflareDns01Solver, create_cloudflare_dns01_solver

__all__ = [
    "ChallengePreparation",
    "CloudflareDns01Solver",
    "Dns01Error",
    "PropagationTimeoutError",
    "RemoteApiError",
    "SolverConfig",
    "ZoneNotFoundError",
    "create_cloudflare_dns01_solver",
    "load_config",
]
__version__ = "0.1.0"
