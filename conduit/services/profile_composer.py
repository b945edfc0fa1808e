"""Profile Composer — viewer-relative Profile from a user and the follow graph.

Invariants:
    - following = viewer is known AND the follow graph has (viewer -> subject)
    - Anonymous viewers never trigger a follow-graph lookup
    - No mutation, no caching beyond a single call
"""

from uuid import UUID

from conduit.core.compose import anonymous_profile, build_profile
from conduit.core.domain_types import Profile
from conduit.core.repository_protocols import FollowLookup, UserLike


class ProfileComposer:
    def __init__(self, follows: FollowLookup):
        self.follows = follows

    async def compose(self, subject: UserLike, viewer_id: UUID | None) -> Profile:
        if viewer_id is None:
            return anonymous_profile(subject)
        following = await self.follows.is_following(viewer_id, subject.id)
        return build_profile(subject, following)
