from chirpy.models.account import Account, AccountView
from chirpy.models.document import PersistedDocument
from chirpy.models.post import Post

__all__ = [
    "Account",
    "AccountView",
    "PersistedDocument",
    "Post",
]
