from chirpy.services.posts.dto import CreatePostIn
from chirpy.services.posts.profanity import PROFANE_WORDS, clean_body
from chirpy.services.posts.service import PostService

__all__ = ["CreatePostIn", "PROFANE_WORDS", "PostService", "clean_body"]
