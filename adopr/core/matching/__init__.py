from adopr.core.matching.build_matcher import (
    UNKNOWN_BUILD,
    BuildMatcher,
    describe_build,
)

__all__ = ["BuildMatcher", "describe_build", "UNKNOWN_BUILD"]
