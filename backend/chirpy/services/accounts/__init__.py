from chirpy.services.accounts.dto import RegisterIn, UpdateCredentialsIn
from chirpy.services.accounts.service import AccountService

__all__ = ["AccountService", "RegisterIn", "UpdateCredentialsIn"]
