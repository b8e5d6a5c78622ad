"""
Unit tests for AggregationService.

Tests cover:
- Video listing: search, owner filter, sorting, pagination, validation
- Channel stats, including the empty channel
- Video detail, channel videos, video comments, user tweets and playlists
- Playlist detail population
"""

import uuid

import pytest

from app.core.errors import InvalidArgument, NotFound
from app.models.like import LikeTarget
from app.services.aggregation import AggregationService


@pytest.fixture
def service(db_session):
    return AggregationService(db_session)


# ========================================
# Video listing
# ========================================


class TestListVideos:

    def test_search_is_case_insensitive_substring(self, service, seed, alice):
        seed.video(alice, "cats and dogs")
        seed.video(alice, "Ocean")

        page = service.list_videos(query="Cat")

        assert page.total_count == 1
        assert [video.title for video in page.videos] == ["cats and dogs"]

    def test_search_matches_description(self, service, seed, alice):
        seed.video(alice, "Holiday", description="Filmed with my CAT")
        seed.video(alice, "Work")

        page = service.list_videos(query="cat")

        assert [video.title for video in page.videos] == ["Holiday"]

    def test_search_treats_wildcards_literally(self, service, seed, alice):
        seed.video(alice, "100% real")
        seed.video(alice, "1000 reasons")

        page = service.list_videos(query="100%")

        assert [video.title for video in page.videos] == ["100% real"]

    def test_search_keeps_surrounding_whitespace(self, service, seed, alice):
        seed.video(alice, "a dog")
        seed.video(alice, "hotdog stand")

        page = service.list_videos(query=" dog")

        assert [video.title for video in page.videos] == ["a dog"]

    def test_blank_search_matches_everything(self, service, seed, alice):
        seed.video(alice, "one")
        seed.video(alice, "two")

        assert service.list_videos(query="   ").total_count == 2

    def test_owner_filter(self, service, seed, alice, bob):
        seed.video(alice, "A1")
        seed.video(bob, "B1")

        page = service.list_videos(user_id=str(bob.id))

        assert [video.title for video in page.videos] == ["B1"]
        assert page.videos[0].owner.username == "bob"

    def test_default_sort_is_newest_first(self, service, seed, alice):
        for title in ("old", "middle", "new"):
            seed.video(alice, title)

        page = service.list_videos()

        assert [video.title for video in page.videos] == ["new", "middle", "old"]

    @pytest.mark.parametrize("sort_by, sort_type, expected", [
        ("title", "asc", ["alpha", "bravo", "charlie"]),
        ("views", "desc", ["bravo", "charlie", "alpha"]),
        ("duration", "asc", ["charlie", "alpha", "bravo"]),
    ])
    def test_sort_fields(self, service, seed, alice, sort_by, sort_type, expected):
        seed.video(alice, "charlie", view_count=50, duration_seconds=10)
        seed.video(alice, "alpha", view_count=5, duration_seconds=20)
        seed.video(alice, "bravo", view_count=500, duration_seconds=30)

        page = service.list_videos(sort_by=sort_by, sort_type=sort_type)

        assert [video.title for video in page.videos] == expected

    def test_ties_are_broken_by_id(self, service, seed, alice):
        videos = [seed.video(alice, "same", view_count=1) for _ in range(4)]

        first = service.list_videos(sort_by="views", sort_type="asc", page=1, limit=2)
        second = service.list_videos(sort_by="views", sort_type="asc", page=2, limit=2)

        listed = [video.id for video in first.videos + second.videos]
        assert listed == sorted(video.id for video in videos)

    def test_pagination_arithmetic(self, service, seed, alice):
        for i in range(25):
            seed.video(alice, f"Video {i:02d}")

        page = service.list_videos(page=3, limit=10)

        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.page == 3
        assert page.limit == 10
        assert len(page.videos) == 5

    def test_empty_listing(self, service):
        page = service.list_videos()

        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.videos == []

    @pytest.mark.parametrize("kwargs", [
        {"page": 0},
        {"limit": 0},
        {"limit": 1000},
        {"sort_by": "bogus"},
        {"sort_type": "sideways"},
        {"user_id": "not-an-id"},
    ])
    def test_invalid_arguments(self, service, kwargs):
        with pytest.raises(InvalidArgument):
            service.list_videos(**kwargs)


# ========================================
# Channel stats
# ========================================


class TestChannelStats:

    def test_empty_channel_reports_zeros(self, service, alice):
        stats = service.channel_stats(str(alice.id))

        assert stats.model_dump(by_alias=True) == {
            "totalVideos": 0,
            "totalViews": 0,
            "totalLikes": 0,
            "totalSubscribers": 0,
        }

    def test_counts(self, service, seed, alice, bob):
        carol = seed.user("carol")
        first = seed.video(alice, "First", view_count=10)
        second = seed.video(alice, "Second", view_count=32)
        other = seed.video(bob, "Other", view_count=1000)
        seed.like(LikeTarget.VIDEO, first.id, bob)
        seed.like(LikeTarget.VIDEO, second.id, bob)
        seed.like(LikeTarget.VIDEO, second.id, carol)
        seed.like(LikeTarget.VIDEO, other.id, carol)
        # Comment likes are not video likes
        seed.like(LikeTarget.COMMENT, seed.comment(first, bob).id, carol)
        seed.subscription(alice, bob)
        seed.subscription(alice, carol)
        seed.subscription(bob, carol)

        stats = service.channel_stats(alice.id)

        assert stats.total_videos == 2
        assert stats.total_views == 42
        assert stats.total_likes == 3
        assert stats.total_subscribers == 2

    def test_unknown_channel(self, service):
        with pytest.raises(NotFound):
            service.channel_stats(str(uuid.uuid4()))

    def test_malformed_channel_id(self, service):
        with pytest.raises(InvalidArgument):
            service.channel_stats("channel-1")


# ========================================
# Per-parent listings
# ========================================


class TestChannelVideos:

    def test_newest_first_with_paging(self, service, seed, alice, bob):
        for i in range(3):
            seed.video(alice, f"A{i}")
        seed.video(bob, "B0")

        page = service.channel_videos(alice.id, page=1, limit=2)

        assert page.total_videos == 3
        assert page.current_page == 1
        assert page.total_pages == 2
        assert [video.title for video in page.videos] == ["A2", "A1"]

    def test_unknown_channel(self, service):
        with pytest.raises(NotFound):
            service.channel_videos(uuid.uuid4(), page=1, limit=10)


class TestVideoDetail:

    def test_video_with_owner(self, service, seed, alice):
        video = seed.video(alice, "Talk", view_count=7)

        detail = service.video_detail(str(video.id))

        assert detail.title == "Talk"
        assert detail.views == 7
        assert detail.owner.username == "alice"

    def test_missing_video(self, service):
        with pytest.raises(NotFound):
            service.video_detail(uuid.uuid4())

    def test_malformed_video_id(self, service):
        with pytest.raises(InvalidArgument):
            service.video_detail("abc")


class TestVideoComments:

    def test_comments_with_owner_summary(self, service, seed, alice, bob):
        video = seed.video(alice, "Talk")
        seed.comment(video, alice, "first!")
        seed.comment(video, bob, "great talk")

        page = service.video_comments(str(video.id), page=1, limit=10)

        assert page.total_comments == 2
        assert [comment.content for comment in page.comments] == ["great talk", "first!"]
        owner = page.comments[0].owner
        assert owner.username == "bob"
        assert owner.display_name == "Bob"
        assert not hasattr(owner, "email")

    def test_missing_video(self, service):
        with pytest.raises(NotFound):
            service.video_comments(uuid.uuid4(), page=1, limit=10)

    def test_malformed_video_id(self, service):
        with pytest.raises(InvalidArgument):
            service.video_comments("abc", page=1, limit=10)


class TestUserTweets:

    def test_newest_first(self, service, seed, alice, bob):
        seed.tweet(alice, "one")
        seed.tweet(alice, "two")
        seed.tweet(bob, "other")

        page = service.user_tweets(alice.id, page=1, limit=10)

        assert page.total_tweets == 2
        assert [tweet.content for tweet in page.tweets] == ["two", "one"]

    def test_unknown_user_has_no_tweets(self, service):
        page = service.user_tweets(uuid.uuid4(), page=1, limit=10)

        assert page.total_tweets == 0
        assert page.tweets == []

    def test_malformed_user_id(self, service):
        with pytest.raises(InvalidArgument):
            service.user_tweets("nope", page=1, limit=10)


class TestPlaylists:

    def test_user_playlists(self, service, seed, alice):
        video = seed.video(alice, "Song")
        seed.playlist(alice, "Empty")
        seed.playlist(alice, "Music", videos=[video, video])

        page = service.user_playlists(alice.id, page=1, limit=10)

        assert page.total_playlists == 2
        music = page.playlists[0]
        assert music.name == "Music"
        assert music.video_ids == [video.id]
        assert music.video_count == 1

    def test_playlist_detail_keeps_insertion_order(self, service, seed, alice, bob):
        first = seed.video(bob, "First")
        second = seed.video(alice, "Second")
        playlist = seed.playlist(alice, "Mix", videos=[second, first])

        detail = service.playlist_detail(str(playlist.id))

        assert detail.owner.username == "alice"
        assert [video.title for video in detail.videos] == ["Second", "First"]
        assert detail.videos[1].owner.username == "bob"

    def test_playlist_detail_missing(self, service):
        with pytest.raises(NotFound):
            service.playlist_detail(uuid.uuid4())
