"""Domain types — frozen read models, partial user changes."""

import dataclasses

import pytest

from conduit.core.domain_types import FavoriteInfo, Profile, UserChanges


def test_profile_is_frozen():
    profile = Profile(username="a", bio=None, image=None, following=False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.following = True


def test_favorite_info_is_frozen():
    info = FavoriteInfo(favorited=True, favorites_count=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.favorites_count = 2


def test_user_changes_only_reports_provided_fields():
    changes = UserChanges(bio="hello", image=None)
    assert changes.provided() == {"bio": "hello"}


def test_user_changes_keeps_empty_string():
    # "" clears the bio; only None means "not provided"
    assert UserChanges(bio="").provided() == {"bio": ""}


def test_empty_user_changes():
    assert UserChanges().provided() == {}
