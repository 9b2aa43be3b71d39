from datetime import datetime, timedelta, timezone

from BhapTracker.models.Bhap import Bhap
from BhapTracker.models.User import User
from BhapTracker.models.Vote import Vote
from BhapTracker.share.TimeUtils import TimeUtils


class TestTimeUtils:
    def test_utcnow_is_aware(self):
        assert TimeUtils.utcnow().utcoffset() == timedelta(0)

    def test_naive_value_is_read_as_utc(self):
        naive = datetime(2024, 4, 1, 12, 0, 0)

        assert TimeUtils.ensure_utc(naive) == datetime(2024, 4, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_other_offsets_are_converted(self):
        plus_eight = datetime(2024, 4, 1, 20, 0, 0, tzinfo=timezone(timedelta(hours=8)))

        converted = TimeUtils.ensure_utc(plus_eight)

        assert converted.tzinfo is timezone.utc
        assert converted.hour == 12

    def test_none_passes_through(self):
        assert TimeUtils.ensure_utc(None) is None


class TestModelDefaults:
    def test_model_timestamps_default_to_aware_utc(self):
        bhap = Bhap(id=0, title="草稿", author_id=1)
        user = User(email="a@example.com", first_name="A", last_name="B")
        vote = Vote(bhap_id=0, voter_id=1, value="Accepted")

        for value in (bhap.created_date, bhap.last_modified, user.created_at, vote.cast_at):
            assert value.tzinfo is not None
