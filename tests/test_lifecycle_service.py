"""LifecycleService 的测试"""

from itertools import product

import pytest

from BhapTracker.cogs.Bhap.LifecycleService import LifecycleService
from BhapTracker.share.enums import BhapStatus, OptionsMode
from BhapTracker.share.errors import InvalidTransition, InvalidVoteValue


class TestDetermineViewMode:
    def test_every_input_maps_to_exactly_one_mode(self):
        for status, logged_in, is_author, has_voted in product(
            BhapStatus, [True, False], [True, False], [True, False]
        ):
            mode = LifecycleService.determine_view_mode(status, logged_in, is_author, has_voted)
            assert isinstance(mode, OptionsMode)

    def test_every_status_has_a_stage(self):
        assert set(LifecycleService.STATUS_STAGE) == set(BhapStatus)

    @pytest.mark.parametrize("status", list(BhapStatus))
    def test_not_logged_in_regardless_of_status(self, status):
        mode = LifecycleService.determine_view_mode(status, False, True, True)
        assert mode is OptionsMode.NOT_LOGGED_IN

    def test_draft_author(self):
        mode = LifecycleService.determine_view_mode(BhapStatus.DRAFT, True, True, False)
        assert mode is OptionsMode.DRAFT_AUTHOR
        assert LifecycleService.is_editable(BhapStatus.DRAFT)

    def test_draft_not_author(self):
        mode = LifecycleService.determine_view_mode(BhapStatus.DRAFT, True, False, False)
        assert mode is OptionsMode.DRAFT_NOT_AUTHOR

    def test_discussion_author_cannot_vote_even_with_vote_flag(self):
        mode = LifecycleService.determine_view_mode(BhapStatus.DISCUSSION, True, True, True)
        assert mode is OptionsMode.DISCUSSION_AUTHOR

    def test_discussion_split_by_vote(self):
        assert (
            LifecycleService.determine_view_mode(BhapStatus.DISCUSSION, True, False, False)
            is OptionsMode.DISCUSSION_NO_VOTE
        )
        assert (
            LifecycleService.determine_view_mode(BhapStatus.DISCUSSION, True, False, True)
            is OptionsMode.DISCUSSION_VOTED
        )

    @pytest.mark.parametrize(
        "status",
        [s for s in BhapStatus if s not in (BhapStatus.DRAFT, BhapStatus.DISCUSSION)],
    )
    def test_other_statuses_are_finalized(self, status):
        for is_author, has_voted in product([True, False], [True, False]):
            mode = LifecycleService.determine_view_mode(status, True, is_author, has_voted)
            assert mode is OptionsMode.FINALIZED

    def test_same_inputs_same_output(self):
        first = LifecycleService.determine_view_mode(BhapStatus.DISCUSSION, True, False, True)
        second = LifecycleService.determine_view_mode(BhapStatus.DISCUSSION, True, False, True)
        assert first is second


class TestIsEditable:
    @pytest.mark.parametrize("status", list(BhapStatus))
    def test_only_draft_is_editable(self, status):
        assert LifecycleService.is_editable(status) == (status is BhapStatus.DRAFT)


class TestTransitions:
    def test_every_status_has_transition_entry(self):
        assert set(LifecycleService.TRANSITIONS) == set(BhapStatus)

    def test_pipeline(self):
        assert LifecycleService.can_transition(BhapStatus.DRAFT, BhapStatus.DISCUSSION)
        assert LifecycleService.can_transition(BhapStatus.DISCUSSION, BhapStatus.ACCEPTED)
        assert LifecycleService.can_transition(BhapStatus.DISCUSSION, BhapStatus.REJECTED)
        assert LifecycleService.can_transition(BhapStatus.ACCEPTED, BhapStatus.REPLACED)

    def test_cannot_skip_discussion(self):
        assert not LifecycleService.can_transition(BhapStatus.DRAFT, BhapStatus.ACCEPTED)
        with pytest.raises(InvalidTransition):
            LifecycleService.ensure_transition(BhapStatus.DRAFT, BhapStatus.ACCEPTED)

    @pytest.mark.parametrize(
        "status", [BhapStatus.REJECTED, BhapStatus.WITHDRAWN, BhapStatus.REPLACED]
    )
    def test_terminal_statuses_have_no_exit(self, status):
        assert LifecycleService.is_terminal(status)
        for target in BhapStatus:
            with pytest.raises(InvalidTransition):
                LifecycleService.ensure_transition(status, target)

    def test_accepted_is_not_terminal_until_replaced(self):
        assert not LifecycleService.is_terminal(BhapStatus.ACCEPTED)
        assert LifecycleService.allowed_transitions(BhapStatus.ACCEPTED) == frozenset(
            {BhapStatus.REPLACED}
        )

    def test_author_only_transitions(self):
        assert LifecycleService.requires_author(BhapStatus.DRAFT, BhapStatus.DISCUSSION)
        assert LifecycleService.requires_author(BhapStatus.DISCUSSION, BhapStatus.WITHDRAWN)
        assert not LifecycleService.requires_author(BhapStatus.DISCUSSION, BhapStatus.ACCEPTED)

    def test_author_transitions_are_valid_transitions(self):
        for current, target in LifecycleService.AUTHOR_TRANSITIONS:
            assert LifecycleService.can_transition(current, target)


class TestSelectedVoteLabel:
    def test_labels(self):
        assert LifecycleService.selected_vote_label(None) == ""
        assert LifecycleService.selected_vote_label("Accepted") == "ACCEPT"
        assert LifecycleService.selected_vote_label("Rejected") == "REJECTED"

    def test_unknown_value(self):
        with pytest.raises(InvalidVoteValue):
            LifecycleService.selected_vote_label("Abstain")
