"""Profile composer — viewer-relative following flag from the follow graph."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from conduit.services.profile_composer import ProfileComposer


@dataclass
class FakeUser:
    id: UUID
    username: str
    bio: str | None = None
    image: str | None = None


class RecordingFollows:
    def __init__(self, edges: set[tuple[UUID, UUID]] = frozenset()):
        self.edges = set(edges)
        self.calls: list[tuple[UUID, UUID]] = []

    async def is_following(self, follower_id: UUID, followee_id: UUID) -> bool:
        self.calls.append((follower_id, followee_id))
        return (follower_id, followee_id) in self.edges


async def test_anonymous_viewer_skips_follow_lookup():
    follows = RecordingFollows()
    subject = FakeUser(uuid4(), "jake", bio="I work at statefarm")
    profile = await ProfileComposer(follows).compose(subject, None)
    assert profile.following is False
    assert profile.username == "jake"
    assert profile.bio == "I work at statefarm"
    assert follows.calls == []


async def test_viewer_who_follows():
    viewer, subject = uuid4(), FakeUser(uuid4(), "jake")
    follows = RecordingFollows({(viewer, subject.id)})
    profile = await ProfileComposer(follows).compose(subject, viewer)
    assert profile.following is True
    assert follows.calls == [(viewer, subject.id)]


async def test_viewer_who_does_not_follow():
    viewer, subject = uuid4(), FakeUser(uuid4(), "jake")
    follows = RecordingFollows({(subject.id, viewer)})
    profile = await ProfileComposer(follows).compose(subject, viewer)
    assert profile.following is False


async def test_against_real_follow_graph(services, alice, bob):
    await services.follows.follow(alice.id, bob.id)
    seen_by_alice = await services.profiles.compose(bob, alice.id)
    seen_by_bob = await services.profiles.compose(alice, bob.id)
    assert seen_by_alice.following is True
    assert seen_by_bob.following is False
