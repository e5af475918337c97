from .api import CandidateSource, make_source

__all__ = ["CandidateSource", "make_source"]
